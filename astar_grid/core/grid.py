"""Fixed-size square grid owning its tiles."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from .errors import OutOfBounds
from .tile import Tile


BlockPredicate = Callable[[int, int], bool]


def _never_blocked(row: int, col: int) -> bool:
    return False


class Grid:
    """``size`` x ``size`` collection of :class:`Tile` objects.

    Tiles live in a single flat list indexed by ``row * size + col``; that
    index is what :attr:`Tile.parent` stores, so links always resolve to the
    tile objects owned here.
    """

    def __init__(self, size: int, block_predicate: Optional[BlockPredicate] = None) -> None:
        if not isinstance(size, int) or size <= 0:
            raise ValueError("size must be a positive integer")
        self.size = size
        predicate = block_predicate or _never_blocked
        self._tiles: List[Tile] = [
            Tile(row, col, blocked=bool(predicate(row, col)))
            for row in range(size)
            for col in range(size)
        ]

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def index_of(self, tile: Tile) -> int:
        """Return the flat storage index of ``tile``."""
        return tile.row * self.size + tile.col

    def at(self, row: int, col: int) -> Tile:
        """Return the tile at ``(row, col)`` or raise :class:`OutOfBounds`."""
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.size)
        return self._tiles[row * self.size + col]

    def is_traversable(self, row: int, col: int) -> bool:
        """Return ``False`` for out-of-bounds or blocked cells."""
        if not self.in_bounds(row, col):
            return False
        return not self._tiles[row * self.size + col].blocked

    def parent_of(self, tile: Tile) -> Optional[Tile]:
        """Resolve ``tile.parent`` to the owning grid's tile, if any."""
        if tile.parent is None:
            return None
        return self._tiles[tile.parent]

    def tiles(self) -> Iterator[Tile]:
        """Iterate all tiles in row-major order."""
        return iter(self._tiles)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Clear search bookkeeping on every tile; the block layout is kept."""
        for tile in self._tiles:
            tile.clear()

    def __len__(self) -> int:
        return len(self._tiles)


__all__ = ["BlockPredicate", "Grid"]
