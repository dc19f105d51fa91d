"""Tick-driven snake simulation on a bounded grid."""

from __future__ import annotations

import enum
import logging

import numpy as np

from grid_snake.food import FoodSpawner
from grid_snake.grid import Cell, CellType, Grid
from grid_snake.snake import MIN_START_LENGTH, Direction, Snake

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    """Lifecycle states of a simulation."""

    LOST = "lost"
    RUNNING = "running"
    WON = "won"


class GridSimulation:
    """Single-snake simulation advanced one :meth:`tick` at a time.

    The simulation owns the grid, snake, heading, and food. It starts in
    the not-running state; :meth:`restart` begins a game. Player actions
    that are not allowed (reversing, steering a stopped game) are
    ignored rather than reported.
    """

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        initial_length: int = 5,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not MIN_START_LENGTH <= initial_length < width:
            raise ValueError(
                f"initial_length must be at least {MIN_START_LENGTH} "
                "and smaller than width.",
            )
        self.grid = Grid(width=width, height=height)
        self.initial_length = initial_length
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(self.grid, rng=self.rng)

        self.snake: Snake | None = None
        self.heading = Direction.RIGHT
        self.status = GameStatus.LOST
        self.score = 0
        self.ticks = 0

    @classmethod
    def from_config(cls, config) -> GridSimulation:
        """Build a simulation from a :class:`~grid_snake.config.GameConfig`."""
        return cls(
            width=config.grid_width,
            height=config.grid_height,
            initial_length=config.initial_length,
            seed=config.seed,
        )

    @property
    def food(self) -> Cell | None:
        return self.food_spawner.position

    # --- operations ---

    def restart(self) -> None:
        """Start a fresh game with the snake in the top-left row."""
        self.grid.clear()
        self.food_spawner.clear()
        self.snake = Snake.horizontal(self.initial_length)
        for cell in self.snake.body:
            self.grid.set(cell, CellType.SNAKE)
        self.heading = Direction.RIGHT
        self.score = 0
        self.ticks = 0
        self.status = GameStatus.RUNNING
        self.spawn_food()
        logger.info("New game started on a %dx%d grid.",
                    self.grid.width, self.grid.height)

    def set_heading(self, direction: Direction) -> None:
        """Steer the snake for the next tick.

        Ignored when the game is not running or *direction* reverses the
        current heading.
        """
        if self.status is not GameStatus.RUNNING:
            return
        if direction is self.heading.opposite:
            return
        self.heading = direction

    def tick(self) -> None:
        """Advance the game by one step."""
        if self.status is not GameStatus.RUNNING:
            return
        self.ticks += 1

        candidate = self.snake.next_head(self.heading)

        if not self.grid.in_bounds(candidate):
            self._lose("wall")
            return

        # The tail moves away this tick, so only the rest of the body blocks.
        if candidate != self.snake.tail and self.snake.occupies(candidate):
            self._lose("self")
            return

        will_grow = candidate == self.food
        vacated = self.snake.advance(candidate, grow=will_grow)
        if vacated is not None:
            self.grid.set(vacated, CellType.EMPTY)
        self.grid.set(candidate, CellType.SNAKE)

        if will_grow:
            self.score += 1
            if self.spawn_food() is None:
                self.status = GameStatus.WON
                logger.info("Board filled at tick %d with score %d.",
                            self.ticks, self.score)

    def spawn_food(self) -> Cell | None:
        """Place food on a random cell not covered by the snake.

        Returns ``None`` when the snake covers the whole board.
        """
        return self.food_spawner.spawn()

    # --- queries ---

    def is_occupied(self, cell: Cell) -> bool:
        return self.grid.in_bounds(cell) and self.grid.get(cell) == CellType.SNAKE

    def is_food(self, cell: Cell) -> bool:
        return self.food is not None and tuple(cell) == self.food

    def is_lost(self) -> bool:
        return self.status is GameStatus.LOST

    def is_won(self) -> bool:
        return self.status is GameStatus.WON

    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def snake_cells(self) -> tuple[Cell, ...]:
        """Snake cells ordered tail to head; empty before the first game."""
        return tuple(self.snake.body) if self.snake is not None else ()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        food = self.food
        return {
            "status": self.status.value,
            "ticks": self.ticks,
            "score": self.score,
            "heading": self.heading.name,
            "snake": [list(c) for c in self.snake_cells()],
            "food": list(food) if food is not None else None,
            "grid": self.grid.to_dict(),
        }

    def _lose(self, cause: str) -> None:
        self.status = GameStatus.LOST
        logger.info("Snake hit %s at tick %d with score %d.",
                    cause, self.ticks, self.score)
