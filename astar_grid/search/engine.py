"""Best-first (A*) search over a :class:`~astar_grid.core.grid.Grid`.

Movement is 8-connected. Orthogonal steps cost ``orthogonal_cost`` and
diagonal steps ``diagonal_cost``. The heuristic is the unscaled Manhattan
cell distance even though diagonal moves are allowed. It stays admissible
only while ``orthogonal_cost >= 1`` and ``diagonal_cost >= 2``; below that
the returned path is not guaranteed to be cheapest. Closed tiles are never
reopened.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..core.errors import InternalInconsistency, InvalidEndpoint, SearchBudgetExceeded
from ..core.grid import Grid
from ..core.tile import Coord, Tile
from .frontier import Frontier
from .visited import VisitedSet

logger = logging.getLogger(__name__)


Endpoint = Union[Tile, Coord]

DEFAULT_DIAGONAL_COST = 14
DEFAULT_ORTHOGONAL_COST = 10

_OFFSETS: Tuple[Coord, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class SearchState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    """Outcome of one :meth:`SearchEngine.find_path` call.

    ``path`` lists the interior waypoints from start to goal and excludes
    both endpoints. ``cost`` is the goal's accumulated cost when found.
    """

    found: bool
    state: SearchState
    visited_count: int
    path: List[Coord] = field(default_factory=list)
    cost: Optional[int] = None


def _heuristic(tile: Tile, goal: Tile) -> int:
    """Manhattan distance from ``tile`` to ``goal``."""

    return abs(goal.row - tile.row) + abs(goal.col - tile.col)


class SearchEngine:
    """Single A* run over ``grid`` between two of its tiles.

    The engine owns the frontier and the visited set for the duration of the
    run and mutates tile costs in place. Create a new engine per run; call
    :meth:`Grid.reset` between runs over the same grid.
    """

    def __init__(
        self,
        grid: Grid,
        diagonal_cost: int = DEFAULT_DIAGONAL_COST,
        orthogonal_cost: int = DEFAULT_ORTHOGONAL_COST,
        max_expansions: Optional[int] = None,
    ) -> None:
        for name, value in (
            ("diagonal_cost", diagonal_cost),
            ("orthogonal_cost", orthogonal_cost),
        ):
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer")
        if max_expansions is not None and max_expansions <= 0:
            raise ValueError("max_expansions must be positive or None")

        self.grid = grid
        self.diagonal_cost = diagonal_cost
        self.orthogonal_cost = orthogonal_cost
        self.max_expansions = max_expansions

        self.frontier = Frontier()
        self.visited = VisitedSet()
        self.state = SearchState.NOT_STARTED
        self.start: Optional[Tile] = None
        self.goal: Optional[Tile] = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _resolve(self, endpoint: Endpoint, label: str) -> Tile:
        if isinstance(endpoint, Tile):
            row, col = endpoint.row, endpoint.col
        else:
            row, col = endpoint
        if not self.grid.in_bounds(row, col):
            raise InvalidEndpoint(f"{label} ({row}, {col}) is outside the grid")
        tile = self.grid.at(row, col)
        if tile.blocked:
            raise InvalidEndpoint(f"{label} ({row}, {col}) is blocked")
        return tile

    def _expand(self, current: Tile, goal: Tile) -> None:
        """Discover or relax every open neighbour of ``current``."""

        current_index = self.grid.index_of(current)
        for dr, dc in _OFFSETS:
            row, col = current.row + dr, current.col + dc
            if not self.grid.is_traversable(row, col):
                continue
            neighbour = self.grid.at(row, col)
            if self.visited.is_visited(neighbour):
                continue

            move_cost = self.diagonal_cost if dr and dc else self.orthogonal_cost
            tentative_g = current.g + move_cost

            if not self.frontier.contains(neighbour):
                neighbour.g = tentative_g
                neighbour.h = _heuristic(neighbour, goal)
                neighbour.parent = current_index
                self.frontier.insert(neighbour)
            elif tentative_g < neighbour.g:
                neighbour.g = tentative_g
                neighbour.parent = current_index
                self.frontier.replace(neighbour)

    def _reconstruct(self, start: Tile, goal: Tile) -> List[Coord]:
        """Walk parent links back from ``goal``; return interior waypoints."""

        if goal == start:
            return []
        waypoints: List[Coord] = []
        limit = len(self.grid)
        node = self.grid.parent_of(goal)
        while node is not None and node != start:
            if len(waypoints) >= limit:
                break
            waypoints.append(node.coord)
            node = self.grid.parent_of(node)
        if node != start:
            raise InternalInconsistency(
                f"parent chain from {goal.coord} does not reach {start.coord}"
            )
        waypoints.reverse()
        return waypoints

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def find_path(self, start: Endpoint, goal: Endpoint) -> SearchResult:
        """Search from ``start`` to ``goal``.

        Raises :class:`InvalidEndpoint` before touching any tile when either
        endpoint is blocked or out of bounds. An unreachable goal yields a
        result with ``found=False``.
        """

        if self.state is not SearchState.NOT_STARTED:
            raise RuntimeError("a SearchEngine runs exactly once")
        start_tile = self._resolve(start, "start")
        goal_tile = self._resolve(goal, "goal")
        self.start, self.goal = start_tile, goal_tile

        logger.debug(
            "A* %s -> %s on %dx%d grid (diagonal=%d, orthogonal=%d)",
            start_tile.coord,
            goal_tile.coord,
            self.grid.size,
            self.grid.size,
            self.diagonal_cost,
            self.orthogonal_cost,
        )

        self.state = SearchState.RUNNING
        start_tile.g = 0
        start_tile.h = _heuristic(start_tile, goal_tile)
        start_tile.parent = None
        self.frontier.insert(start_tile)

        while not self.frontier.is_empty():
            if (
                self.max_expansions is not None
                and len(self.visited) >= self.max_expansions
            ):
                logger.warning(
                    "A* %s -> %s aborted after %d expansions",
                    start_tile.coord,
                    goal_tile.coord,
                    len(self.visited),
                )
                raise SearchBudgetExceeded(self.max_expansions)

            current = self.frontier.pop_min()
            self.visited.mark_visited(current)

            if current == goal_tile:
                self.state = SearchState.FOUND
                path = self._reconstruct(start_tile, goal_tile)
                logger.info(
                    "Path found: cost %d, %d waypoints, %d tiles visited",
                    current.g,
                    len(path),
                    len(self.visited),
                )
                return SearchResult(
                    found=True,
                    state=self.state,
                    visited_count=len(self.visited),
                    path=path,
                    cost=current.g,
                )

            self._expand(current, goal_tile)

        self.state = SearchState.EXHAUSTED
        logger.info(
            "No path from %s to %s; %d tiles visited",
            start_tile.coord,
            goal_tile.coord,
            len(self.visited),
        )
        return SearchResult(
            found=False, state=self.state, visited_count=len(self.visited)
        )


def find_path(
    grid: Grid,
    start: Endpoint,
    goal: Endpoint,
    diagonal_cost: int = DEFAULT_DIAGONAL_COST,
    orthogonal_cost: int = DEFAULT_ORTHOGONAL_COST,
    max_expansions: Optional[int] = None,
) -> SearchResult:
    """Run a fresh :class:`SearchEngine` over ``grid``."""

    engine = SearchEngine(grid, diagonal_cost, orthogonal_cost, max_expansions)
    return engine.find_path(start, goal)


__all__ = [
    "DEFAULT_DIAGONAL_COST",
    "DEFAULT_ORTHOGONAL_COST",
    "SearchEngine",
    "SearchResult",
    "SearchState",
    "find_path",
]
