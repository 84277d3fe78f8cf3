"""Noise-driven block layouts for demo grids."""

from __future__ import annotations

from random import Random

from ..core.grid import BlockPredicate


def white_noise(
    width: int, height: int, seed: int | None = None
) -> list[list[float]]:
    """Return ``height`` × ``width`` grid of random floats in ``[0, 1)``.

    Parameters
    ----------
    width:
        Number of columns in the generated grid.
    height:
        Number of rows in the generated grid.
    seed:
        Optional seed for deterministic output.
    """

    rnd = Random(seed)
    return [[rnd.random() for _ in range(width)] for _ in range(height)]


def block_mask(
    size: int, chance: int, seed: int | None = None
) -> list[list[bool]]:
    """Return ``size`` × ``size`` mask, ``True`` on roughly 1-in-``chance`` cells.

    A cell is blocked when ``int(value * chance) == 1``, the same draw as
    picking one specific face of a ``chance``-sided die. ``chance <= 1``
    therefore never blocks anything.
    """

    data = white_noise(size, size, seed=seed)
    return [[int(value * chance) == 1 for value in row] for row in data]


def random_block_predicate(
    size: int, chance: int, seed: int | None = None
) -> BlockPredicate:
    """Wrap :func:`block_mask` as a ``(row, col) -> bool`` predicate."""

    mask = block_mask(size, chance, seed)

    def is_blocked(row: int, col: int) -> bool:
        return mask[row][col]

    return is_blocked


__all__ = ["white_noise", "block_mask", "random_block_predicate"]
