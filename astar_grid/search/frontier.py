"""Open set for the grid search: a keyed binary heap over tiles."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional

from ..core.tile import Coord, Tile


# Heap entry: [f, h, discovery_seq, push_id, tile]. ``push_id`` is unique per
# push so entries never fall through to comparing tiles; ``tile`` is set to
# None once the entry has been superseded by ``replace``.
_Entry = List[object]


class Frontier:
    """Priority queue of tiles ordered by ``(f, h, discovery order)``.

    Membership is tracked by tile position, so ``contains`` does not depend on
    the tile's current cost values. ``replace`` invalidates the stale heap
    entry in place and pushes a fresh one, keeping the tile's original
    discovery sequence for tie-breaks.
    """

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        self._entries: Dict[Coord, _Entry] = {}
        self._seq: Dict[Coord, int] = {}
        self._discovered = count()
        self._pushes = count()

    def _push(self, tile: Tile, seq: int) -> None:
        entry: _Entry = [tile.f, tile.h, seq, next(self._pushes), tile]
        self._entries[tile.coord] = entry
        heappush(self._heap, entry)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, tile: Tile) -> None:
        """Add ``tile``; raise ``ValueError`` if it is already queued."""
        if tile.coord in self._entries:
            raise ValueError(f"tile {tile.coord} is already in the frontier")
        seq = next(self._discovered)
        self._seq[tile.coord] = seq
        self._push(tile, seq)

    def contains(self, tile: Tile) -> bool:
        return tile.coord in self._entries

    def replace(self, tile: Tile) -> None:
        """Re-key ``tile`` after its costs changed; inserts if absent."""
        entry = self._entries.pop(tile.coord, None)
        if entry is None:
            self.insert(tile)
            return
        entry[-1] = None
        self._push(tile, self._seq[tile.coord])

    def pop_min(self) -> Tile:
        """Remove and return the tile with the lowest ``(f, h, seq)`` key."""
        while self._heap:
            entry = heappop(self._heap)
            tile: Optional[Tile] = entry[-1]  # type: ignore[assignment]
            if tile is not None:
                del self._entries[tile.coord]
                return tile
        raise IndexError("pop from an empty frontier")

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, tile: Tile) -> bool:
        return self.contains(tile)


__all__ = ["Frontier"]
