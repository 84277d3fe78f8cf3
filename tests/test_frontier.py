import pytest

from astar_grid.core.tile import Tile
from astar_grid.search.frontier import Frontier


def _tile(row, col, g, h):
    return Tile(row, col, g=g, h=h)


def test_pop_min_orders_by_f():
    fr = Frontier()
    fr.insert(_tile(0, 0, 20, 5))
    fr.insert(_tile(0, 1, 10, 3))
    fr.insert(_tile(0, 2, 15, 0))
    assert [fr.pop_min().coord for _ in range(3)] == [(0, 1), (0, 2), (0, 0)]
    assert fr.is_empty()


def test_equal_f_prefers_smaller_h():
    fr = Frontier()
    fr.insert(_tile(0, 0, 10, 4))
    fr.insert(_tile(0, 1, 12, 2))
    assert fr.pop_min().coord == (0, 1)


def test_equal_f_and_h_prefers_earliest_discovery():
    fr = Frontier()
    for col in (3, 1, 2):
        fr.insert(_tile(0, col, 10, 2))
    assert [fr.pop_min().col for _ in range(3)] == [3, 1, 2]


def test_contains_ignores_cost_values():
    fr = Frontier()
    fr.insert(_tile(1, 1, 10, 2))
    assert fr.contains(Tile(1, 1))
    assert Tile(1, 1, g=999) in fr
    assert not fr.contains(Tile(1, 2))


def test_insert_twice_raises():
    fr = Frontier()
    t = _tile(0, 0, 1, 1)
    fr.insert(t)
    with pytest.raises(ValueError):
        fr.insert(Tile(0, 0))


def test_replace_rekeys_tile():
    fr = Frontier()
    a = _tile(0, 0, 30, 1)
    b = _tile(0, 1, 20, 1)
    fr.insert(a)
    fr.insert(b)
    a.g = 10
    fr.replace(a)
    assert len(fr) == 2
    assert fr.pop_min() is a
    assert fr.pop_min() is b
    assert fr.is_empty()


def test_replace_keeps_discovery_order():
    fr = Frontier()
    first = _tile(0, 0, 30, 2)
    second = _tile(0, 1, 20, 2)
    fr.insert(first)
    fr.insert(second)
    first.g = 20
    fr.replace(first)
    assert fr.pop_min() is first


def test_replace_with_unchanged_costs():
    fr = Frontier()
    t = _tile(2, 2, 5, 5)
    fr.insert(t)
    fr.replace(t)
    fr.replace(t)
    assert len(fr) == 1
    assert fr.pop_min() is t
    assert fr.is_empty()


def test_replace_absent_inserts():
    fr = Frontier()
    fr.replace(_tile(0, 0, 1, 1))
    assert len(fr) == 1


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Frontier().pop_min()
