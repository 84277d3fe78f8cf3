"""Tile component: one addressable grid cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


Coord = Tuple[int, int]


@dataclass(eq=False)
class Tile:
    """Grid cell with search bookkeeping.

    ``row``/``col`` define identity; two tiles compare equal when they sit at
    the same position regardless of their cost fields. ``parent`` holds the
    flat storage index of the predecessor tile inside the owning grid.
    """

    row: int
    col: int
    blocked: bool = False
    g: int = 0
    h: int = 0
    parent: Optional[int] = None

    @property
    def f(self) -> int:
        """Total estimated cost ``g + h``."""
        return self.g + self.h

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def clear(self) -> None:
        """Return cost fields and parent link to their initial sentinel."""
        self.g = 0
        self.h = 0
        self.parent = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return hash((self.row, self.col))


__all__ = ["Coord", "Tile"]
