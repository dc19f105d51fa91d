"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import CellType

if TYPE_CHECKING:
    from grid_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Keeps a single food item on the grid.

    Uses a NumPy RNG so placement can be seeded or replaced in tests.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self._position: Cell | None = None

    @property
    def position(self) -> Cell | None:
        return self._position

    def spawn(self) -> Cell | None:
        """Place food on a uniformly chosen empty cell.

        Any food already on the grid is removed first. Returns the new
        position, or ``None`` when every cell is taken.
        """
        self.clear()
        empty = self.grid.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food.")
            return None

        pos = empty[int(self.rng.integers(len(empty)))]
        self.grid.set(pos, CellType.FOOD)
        self._position = pos
        logger.debug("Food spawned at %s.", pos)
        return pos

    def place(self, cell: Cell) -> None:
        """Put the food on a specific empty cell."""
        cell = tuple(cell)
        if not self.grid.in_bounds(cell) or self.grid.get(cell) != CellType.EMPTY:
            raise ValueError(f"Cannot place food on {cell}: cell is not empty.")
        self.clear()
        self.grid.set(cell, CellType.FOOD)
        self._position = cell

    def clear(self) -> None:
        """Forget the current food, emptying its cell if still painted."""
        if self._position is None:
            return
        if self.grid.get(self._position) == CellType.FOOD:
            self.grid.set(self._position, CellType.EMPTY)
        self._position = None

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        pos = self._position
        return {"position": list(pos) if pos is not None else None}
