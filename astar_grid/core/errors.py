"""Error kinds raised by the grid and the search engine.

Exhausting the frontier without reaching the goal is not an error; it is
reported as a negative :class:`~astar_grid.search.engine.SearchResult`.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for every failure surfaced by :mod:`astar_grid`."""


class OutOfBounds(SearchError, IndexError):
    """A coordinate fell outside ``[0, size)`` on either axis."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"({row}, {col}) is outside a {size}x{size} grid")
        self.row = row
        self.col = col
        self.size = size


class InvalidEndpoint(SearchError, ValueError):
    """Start or goal is blocked or not part of the grid."""


class InternalInconsistency(SearchError, RuntimeError):
    """Parent links do not lead back to the start tile."""


class SearchBudgetExceeded(SearchError):
    """The run finalized ``max_expansions`` tiles without finishing."""

    def __init__(self, budget: int) -> None:
        super().__init__(f"search aborted after {budget} expansions")
        self.budget = budget


__all__ = [
    "SearchError",
    "OutOfBounds",
    "InvalidEndpoint",
    "InternalInconsistency",
    "SearchBudgetExceeded",
]
