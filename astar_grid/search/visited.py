"""Closed set: positions whose cost has been finalized."""

from __future__ import annotations

from typing import Set

from ..core.tile import Coord, Tile


class VisitedSet:
    """Records finalized tiles by position."""

    def __init__(self) -> None:
        self._coords: Set[Coord] = set()

    def mark_visited(self, tile: Tile) -> None:
        self._coords.add(tile.coord)

    def is_visited(self, tile: Tile) -> bool:
        return tile.coord in self._coords

    def __len__(self) -> int:
        return len(self._coords)

    def __contains__(self, tile: Tile) -> bool:
        return self.is_visited(tile)


__all__ = ["VisitedSet"]
