"""Tests for the Snake module."""

import pytest

from grid_snake.snake import Direction, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT

    def test_offsets(self):
        assert Direction.UP.offset((3, 3)) == (3, 2)
        assert Direction.DOWN.offset((3, 3)) == (3, 4)
        assert Direction.LEFT.offset((3, 3)) == (2, 3)
        assert Direction.RIGHT.offset((3, 3)) == (4, 3)


class TestSnakeInit:
    def test_horizontal(self):
        snake = Snake.horizontal(5)
        assert list(snake.body) == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
        assert snake.head == (4, 0)
        assert snake.tail == (0, 0)
        assert len(snake) == 5

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake.horizontal(0)
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake.horizontal(3)
        assert snake.next_head(Direction.RIGHT) == (3, 0)
        assert snake.next_head(Direction.DOWN) == (2, 1)

    def test_advance_without_growth(self):
        snake = Snake.horizontal(3)
        vacated = snake.advance((3, 0))
        assert vacated == (0, 0)
        assert list(snake.body) == [(1, 0), (2, 0), (3, 0)]

    def test_advance_with_growth(self):
        snake = Snake.horizontal(3)
        vacated = snake.advance((3, 0), grow=True)
        assert vacated is None
        assert len(snake) == 4
        assert snake.head == (3, 0)
        assert snake.tail == (0, 0)


class TestSnakeQueries:
    def test_occupies(self):
        snake = Snake.horizontal(3)
        assert snake.occupies((0, 0))
        assert snake.occupies([2, 0])
        assert not snake.occupies((3, 0))

    def test_to_dict(self):
        snake = Snake([(0, 0), (0, 1)])
        assert snake.to_dict() == {"body": [[0, 0], [0, 1]]}
