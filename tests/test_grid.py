"""Tests for the cell grid."""

import pytest

from edgewfc.core.grid import Cell, Grid
from edgewfc.models import Direction


def test_initialize_gives_every_cell_all_tiles():
    grid = Grid.initialize(4, 3, 5)
    assert len(grid) == 12
    for cell in grid:
        assert cell.candidates == {0, 1, 2, 3, 4}
        assert cell.collapsed is False
        assert cell.final is None


def test_cells_do_not_share_candidate_sets():
    grid = Grid.initialize(2, 1, 3)
    grid[0].candidates.discard(1)
    assert grid[1].candidates == {0, 1, 2}


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_initialize_rejects_non_positive_size(width, height):
    with pytest.raises(ValueError):
        Grid.initialize(width, height, 2)


def test_index_is_row_major():
    grid = Grid.initialize(4, 3, 1)
    assert grid.index_of(0, 0) == 0
    assert grid.index_of(3, 0) == 3
    assert grid.index_of(1, 2) == 9
    assert grid.position_of(9) == (1, 2)
    assert grid.position_of(7) == (3, 1)


def test_out_of_range_positions_fail_fast():
    grid = Grid.initialize(2, 2, 1)
    with pytest.raises(IndexError):
        grid.index_of(2, 0)
    with pytest.raises(IndexError):
        grid.index_of(0, -1)
    with pytest.raises(IndexError):
        grid[4]
    with pytest.raises(IndexError):
        grid[-1]
    with pytest.raises(IndexError):
        grid.position_of(10)


def test_neighbours_respect_borders():
    grid = Grid.initialize(3, 3, 1)
    assert grid.neighbours(0) == [(Direction.EAST, 1), (Direction.SOUTH, 3)]
    assert grid.neighbours(4) == [
        (Direction.NORTH, 1), (Direction.EAST, 5), (Direction.SOUTH, 7), (Direction.WEST, 3)
    ]
    assert grid.neighbours(8) == [(Direction.NORTH, 5), (Direction.WEST, 7)]


def test_single_cell_grid_has_no_neighbours():
    grid = Grid.initialize(1, 1, 3)
    assert grid.neighbours(0) == []


def test_collapse_to_and_summaries():
    grid = Grid.initialize(2, 2, 3)
    grid[1].collapse_to(2)
    grid[3].candidates = set()

    assert grid[1].candidates == {2}
    assert grid[1].final == 2
    assert grid.collapsed_count() == 1
    assert not grid.is_fully_collapsed()
    assert grid.contradictions() == [3]
    assert grid.final_states() == [None, 2, None, None]


def test_contradiction_flag():
    assert Cell(candidates=set()).is_contradiction
    assert not Cell(candidates={1}).is_contradiction
    done = Cell()
    done.collapse_to(0)
    assert not done.is_contradiction
