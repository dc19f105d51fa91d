"""Headings and the snake body."""

from __future__ import annotations

import enum
from collections import deque

from grid_snake.grid import Cell

# Shortest snake a game may start with.
MIN_START_LENGTH = 5


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) values; y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def offset(self, cell: Cell) -> Cell:
        """Return *cell* moved one unit in this direction."""
        dx, dy = self.value
        return cell[0] + dx, cell[1] + dy


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) segments.

    The tail is ``body[0]``; the head is ``body[-1]``. Moving appends the
    new head on the right and drops the tail from the left.
    """

    def __init__(self, cells) -> None:
        self.body: deque[Cell] = deque(tuple(c) for c in cells)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    @classmethod
    def horizontal(cls, length: int, row: int = 0) -> Snake:
        """Build a snake along *row* from x=0, head at x=length-1."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        return cls((x, row) for x in range(length))

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        return self.body[-1]

    @property
    def tail(self) -> Cell:
        return self.body[0]

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        return direction.offset(self.head)

    def advance(self, new_head: Cell, grow: bool = False) -> Cell | None:
        """Move the head to *new_head*.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        vacated = None if grow else self.body.popleft()
        self.body.append(new_head)
        return vacated

    def occupies(self, cell: Cell) -> bool:
        return tuple(cell) in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
