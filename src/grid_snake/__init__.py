"""Grid Snake — tick-driven snake simulation."""

from grid_snake.config import GameConfig
from grid_snake.controller import GameController, InputFrame
from grid_snake.grid import CellType, Grid
from grid_snake.simulation import GameStatus, GridSimulation
from grid_snake.snake import Direction, Snake

__all__ = [
    "CellType",
    "Direction",
    "GameConfig",
    "GameController",
    "GameStatus",
    "Grid",
    "GridSimulation",
    "InputFrame",
    "Snake",
]
