"""core package."""

from .errors import (
    InternalInconsistency,
    InvalidEndpoint,
    OutOfBounds,
    SearchBudgetExceeded,
    SearchError,
)
from .grid import Grid
from .tile import Coord, Tile

__all__ = [
    "Coord",
    "Grid",
    "InternalInconsistency",
    "InvalidEndpoint",
    "OutOfBounds",
    "SearchBudgetExceeded",
    "SearchError",
    "Tile",
]
