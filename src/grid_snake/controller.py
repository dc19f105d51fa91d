"""Per-frame input handling and fixed-rate tick scheduling."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from grid_snake.simulation import GridSimulation
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

# Order in which simultaneous key presses are considered.
_DIRECTION_PRIORITY: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass(frozen=True)
class InputFrame:
    """Keys that went from released to pressed during one frame."""

    directions: frozenset[Direction] = frozenset()
    restart: bool = False


class GameController:
    """Drives a :class:`GridSimulation` from a render loop.

    :meth:`update` is called once per frame. The simulation ticks on one
    frame out of every ``frames_per_tick``, so game speed does not depend
    on how often input is polled.
    """

    def __init__(
        self,
        simulation: GridSimulation,
        frames_per_tick: int = 10,
    ) -> None:
        if frames_per_tick < 1:
            raise ValueError("frames_per_tick must be at least 1.")
        self.simulation = simulation
        self.frames_per_tick = frames_per_tick
        self.frame = 0

    def update(self, frame: InputFrame) -> bool:
        """Process one frame of input. Returns True if the game ticked."""
        sim = self.simulation
        if not sim.is_running():
            if not frame.restart:
                return False
            logger.debug("Restart requested at frame %d.", self.frame)
            sim.restart()

        self.frame += 1
        ticked = self._is_tick_frame()
        if ticked:
            sim.tick()

        self._steer(frame.directions)
        return ticked

    def _is_tick_frame(self) -> bool:
        if self.frames_per_tick == 1:
            return True
        return self.frame % self.frames_per_tick == 1

    def _steer(self, pressed: frozenset[Direction]) -> None:
        heading = self.simulation.heading
        for direction in _DIRECTION_PRIORITY:
            if direction in pressed and direction is not heading.opposite:
                self.simulation.set_heading(direction)
                return
