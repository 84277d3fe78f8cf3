import pytest

from astar_grid.core.errors import OutOfBounds, SearchError
from astar_grid.core.grid import Grid


def test_grid_maps_every_coordinate_once():
    grid = Grid(4)
    assert len(grid) == 16
    coords = [t.coord for t in grid.tiles()]
    assert coords == [(r, c) for r in range(4) for c in range(4)]
    assert grid.at(2, 3) is grid.at(2, 3)


def test_grid_block_predicate():
    grid = Grid(3, lambda r, c: r == c)
    assert grid.at(1, 1).blocked
    assert not grid.at(0, 1).blocked
    assert not grid.is_traversable(2, 2)
    assert grid.is_traversable(2, 1)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_grid_at_out_of_bounds(row, col):
    grid = Grid(3)
    with pytest.raises(OutOfBounds):
        grid.at(row, col)
    assert not grid.is_traversable(row, col)


def test_out_of_bounds_is_a_search_error_and_index_error():
    with pytest.raises(SearchError):
        Grid(2).at(5, 5)
    with pytest.raises(IndexError):
        Grid(2).at(5, 5)


@pytest.mark.parametrize("size", [0, -3, 2.5])
def test_grid_rejects_bad_size(size):
    with pytest.raises(ValueError):
        Grid(size)


def test_parent_of_resolves_flat_index():
    grid = Grid(3)
    child = grid.at(2, 2)
    assert grid.parent_of(child) is None
    child.parent = grid.index_of(grid.at(1, 1))
    assert grid.parent_of(child) is grid.at(1, 1)


def test_reset_clears_costs_but_keeps_blocks():
    grid = Grid(3, lambda r, c: (r, c) == (0, 2))
    tile = grid.at(1, 1)
    tile.g, tile.h, tile.parent = 14, 2, 0
    grid.reset()
    assert (tile.g, tile.h, tile.f, tile.parent) == (0, 0, 0, None)
    assert grid.at(0, 2).blocked
    assert sum(t.blocked for t in grid.tiles()) == 1
