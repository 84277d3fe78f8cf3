"""ASCII renderer for grids and search results."""

from __future__ import annotations

from typing import Iterable, Optional

from ...core.grid import Grid
from ...core.tile import Coord


LEGEND = "X - Blocked, S - Origin, G - Goal, o - Path"


def _cell_glyph(
    grid: Grid,
    coord: Coord,
    start: Optional[Coord],
    goal: Optional[Coord],
    path: set[Coord],
) -> str:
    if grid.at(*coord).blocked:
        return "X"
    if coord == start:
        return "S"
    if coord == goal:
        return "G"
    if coord in path:
        return "o"
    return "_"


def render_grid(
    grid: Grid,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
    path: Iterable[Coord] = (),
) -> str:
    """Return ``grid`` as text, one ``|``-separated line per row."""

    waypoints = set(path)
    lines: list[str] = ["__" * grid.size]
    for row in range(grid.size):
        cells = [
            "|" + _cell_glyph(grid, (row, col), start, goal, waypoints)
            for col in range(grid.size)
        ]
        lines.append("".join(cells) + "|")
    return "\n".join(lines) + "\n"


__all__ = ["LEGEND", "render_grid"]
