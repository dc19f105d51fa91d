"""Headless simulation throughput measurement."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.simulation import GridSimulation
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_ticks: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float
    mean_length: float
    wins: int

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s | "
            f"mean length {self.mean_length:.1f}, {self.wins} win(s)"
        )


def benchmark_throughput(
    config: GameConfig | None = None,
    *,
    num_games: int = 100,
    max_ticks: int = 1_000,
    seed: int | None = 42,
) -> BenchmarkResult:
    """Play *num_games* games with random headings and time them.

    Each game ends on a collision, a full board, or after *max_ticks*.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")
    config = config or GameConfig()
    rng = np.random.default_rng(seed)
    sim = GridSimulation(
        width=config.grid_width,
        height=config.grid_height,
        initial_length=config.initial_length,
        rng=rng,
    )

    total_ticks = 0
    lengths: list[int] = []
    wins = 0
    start = time.perf_counter()
    for _ in range(num_games):
        sim.restart()
        for _ in range(max_ticks):
            sim.set_heading(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
            sim.tick()
            total_ticks += 1
            if not sim.is_running():
                break
        lengths.append(len(sim.snake_cells()))
        wins += sim.is_won()
    elapsed = max(time.perf_counter() - start, 1e-9)

    result = BenchmarkResult(
        total_games=num_games,
        total_ticks=total_ticks,
        wall_time_seconds=elapsed,
        games_per_second=num_games / elapsed,
        ticks_per_second=total_ticks / elapsed,
        mean_length=float(np.mean(lengths)),
        wins=wins,
    )
    logger.info(result.summary())
    return result
