"""Tests for the Grid module."""

import numpy as np
import pytest

from grid_snake.grid import CellType, Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 15
        assert grid.height == 15

    def test_custom_dimensions(self):
        grid = Grid(width=10, height=8)
        assert grid.width == 10
        assert grid.height == 8
        assert grid.cells.shape == (8, 10)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 2"):
            Grid(width=1, height=4)
        with pytest.raises(ValueError, match="at least 2"):
            Grid(width=4, height=1)

    def test_all_cells_start_empty(self):
        grid = Grid(width=5, height=5)
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridOperations:
    def test_set_and_get_use_xy(self):
        grid = Grid(width=6, height=4)
        grid.set((5, 1), CellType.SNAKE)
        assert grid.get((5, 1)) == CellType.SNAKE
        assert grid.cells[1, 5] == CellType.SNAKE

    def test_clear(self):
        grid = Grid(width=5, height=5)
        grid.set((0, 0), CellType.SNAKE)
        grid.set((1, 1), CellType.FOOD)
        grid.clear()
        assert np.all(grid.cells == CellType.EMPTY)

    def test_in_bounds(self):
        grid = Grid(width=5, height=3)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 2))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, -1))
        assert not grid.in_bounds((5, 0))
        assert not grid.in_bounds((0, 3))

    def test_empty_cells(self):
        grid = Grid(width=4, height=4)
        assert len(grid.empty_cells()) == 16
        grid.set((0, 0), CellType.SNAKE)
        grid.set((1, 1), CellType.FOOD)
        empty = grid.empty_cells()
        assert len(empty) == 14
        assert (0, 0) not in empty
        assert (1, 1) not in empty

    def test_empty_cells_row_major(self):
        grid = Grid(width=3, height=2)
        assert grid.empty_cells()[:4] == [(0, 0), (1, 0), (2, 0), (0, 1)]


class TestGridSerialization:
    def test_to_dict_reflects_state(self):
        grid = Grid(width=4, height=3)
        grid.set((2, 1), CellType.FOOD)
        d = grid.to_dict()
        assert d["width"] == 4
        assert d["height"] == 3
        assert len(d["cells"]) == 3
        assert d["cells"][1][2] == CellType.FOOD
