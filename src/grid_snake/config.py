"""Game configuration consumed at construction time."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.snake import MIN_START_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Arena geometry, timing, and asset settings.

    The defaults reproduce a 240×240 px board of 16 px tiles.
    """

    # Geometry
    cell_size_px: int = 16
    grid_width: int = 15
    grid_height: int = 15
    initial_length: int = 5

    # Timing
    frames_per_tick: int = 10
    fps: int = 60

    # Window
    window_scale: int = 2

    # Randomness
    seed: int | None = None

    # Sprites
    sprite_sheet: str | None = None
    sprite_columns: int = 32
    background_sprite: int = 129
    snake_sprite: int = 126

    def __post_init__(self) -> None:
        if self.cell_size_px < 1:
            raise ValueError("cell_size_px must be at least 1.")
        if self.grid_width < 2 or self.grid_height < 2:
            raise ValueError("grid_width and grid_height must each be at least 2.")
        if self.initial_length < MIN_START_LENGTH:
            raise ValueError(
                f"initial_length must be at least {MIN_START_LENGTH}.",
            )
        if self.initial_length >= self.grid_width:
            raise ValueError(
                "initial_length must be smaller than grid_width so the "
                "snake fits in the first row with room to move.",
            )
        if self.frames_per_tick < 1:
            raise ValueError("frames_per_tick must be at least 1.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")
        if self.window_scale < 1:
            raise ValueError("window_scale must be at least 1.")
        if self.sprite_columns < 1:
            raise ValueError("sprite_columns must be at least 1.")

    @property
    def screen_size(self) -> tuple[int, int]:
        """Logical board size in pixels."""
        return (
            self.grid_width * self.cell_size_px,
            self.grid_height * self.cell_size_px,
        )

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with *overrides* applied (``None`` values skipped)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
