"""Tests for the headless benchmark."""

import pytest

from grid_snake.benchmark import BenchmarkResult, benchmark_throughput
from grid_snake.config import GameConfig


class TestBenchmark:
    def test_short_run(self):
        config = GameConfig(grid_width=8, grid_height=8)
        result = benchmark_throughput(config, num_games=5, max_ticks=50, seed=1)
        assert isinstance(result, BenchmarkResult)
        assert result.total_games == 5
        assert 5 <= result.total_ticks <= 250
        assert result.ticks_per_second > 0
        assert result.mean_length >= 5

    def test_same_seed_same_ticks(self):
        a = benchmark_throughput(num_games=3, max_ticks=100, seed=9)
        b = benchmark_throughput(num_games=3, max_ticks=100, seed=9)
        assert a.total_ticks == b.total_ticks
        assert a.mean_length == b.mean_length

    def test_summary(self):
        result = benchmark_throughput(num_games=2, max_ticks=10)
        assert "2 games" in result.summary()

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            benchmark_throughput(num_games=0)
        with pytest.raises(ValueError):
            benchmark_throughput(max_ticks=0)
