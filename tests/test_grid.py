import random

import pytest

from gridsnake.core.grid import Cell, Direction, Grid, translate


@pytest.mark.parametrize("size", [0, -1, -30])
def test_grid_rejects_non_positive_size(size):
    with pytest.raises(ValueError):
        Grid(size)

def test_grid_rejects_non_int_size():
    with pytest.raises(ValueError):
        Grid(2.5)

def test_contains_bounds():
    g = Grid(5)
    assert g.contains(Cell(0, 0))
    assert g.contains(Cell(4, 4))
    assert g.contains((2, 3))
    assert not g.contains(Cell(5, 0))
    assert not g.contains(Cell(0, 5))
    assert not g.contains(Cell(-1, 2))
    assert not g.contains(Cell(2, -1))

def test_random_cell_stays_in_bounds_and_covers_grid():
    g = Grid(3)
    rng = random.Random(7)
    seen = {g.random_cell(rng) for _ in range(500)}
    assert all(g.contains(c) for c in seen)
    assert len(seen) == 9

def test_random_cell_uses_injected_rng():
    g = Grid(10)
    a = [g.random_cell(random.Random(42)) for _ in range(3)]
    b = [g.random_cell(random.Random(42)) for _ in range(3)]
    assert a == b

def test_cells_and_free_cells():
    g = Grid(2)
    assert list(g.cells()) == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert g.area == 4
    assert g.free_cells([(0, 0), (1, 1)]) == [(1, 0), (0, 1)]
    assert g.free_cells(g.cells()) == []

@pytest.mark.parametrize("d", list(Direction))
def test_opposite_is_an_involution(d):
    assert d.opposite is not d
    assert d.opposite.opposite is d
    assert (d.dx + d.opposite.dx, d.dy + d.opposite.dy) == (0, 0)

def test_translate_moves_exactly_one_cell():
    c = Cell(2, 2)
    assert translate(c, Direction.UP) == (2, 1)
    assert translate(c, Direction.DOWN) == (2, 3)
    assert translate(c, Direction.LEFT) == (1, 2)
    assert translate(c, Direction.RIGHT) == (3, 2)

def test_parse_direction_names():
    assert Direction.parse("up") is Direction.UP
    assert Direction.parse(" Left ") is Direction.LEFT
    with pytest.raises(ValueError):
        Direction.parse("sideways")
