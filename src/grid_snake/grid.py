"""Occupancy grid for the snake arena."""

from __future__ import annotations

import enum

import numpy as np

Cell = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed arena of ``width`` × ``height`` cells.

    Cells are addressed as ``(x, y)`` with ``y`` growing downward; the
    backing array is indexed ``[y, x]``.
    """

    def __init__(self, width: int = 15, height: int = 15) -> None:
        if width < 2 or height < 2:
            raise ValueError("Grid dimensions must be at least 2×2.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, cell: Cell) -> CellType:
        x, y = cell
        return CellType(self.cells[y, x])

    def set(self, cell: Cell, cell_type: CellType) -> None:
        x, y = cell
        self.cells[y, x] = cell_type

    def empty_cells(self) -> list[Cell]:
        """Return all empty cells in row-major order."""
        ys, xs = np.where(self.cells == CellType.EMPTY)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
