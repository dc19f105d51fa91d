"""Pygame front end: tile drawing, keyboard input, and the window loop."""

from __future__ import annotations

import logging

import pygame

from grid_snake.config import GameConfig
from grid_snake.controller import GameController, InputFrame
from grid_snake.simulation import GridSimulation
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (34, 40, 49)
GRID_LINE_COLOR = (44, 52, 63)
SNAKE_COLOR = (124, 200, 80)
FOOD_COLOR = (220, 60, 60)
TEXT_COLOR = (255, 255, 255)

LOST_MESSAGE = "You've lost :( Press R to restart"
WON_MESSAGE = "Board cleared! Press R to restart"

_KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class SpriteSheetError(RuntimeError):
    """Raised when the tile sheet image cannot be loaded."""


class SpriteSheet:
    """A grid of equally sized tiles cut from one image."""

    def __init__(self, path: str, columns: int, tile_size: int) -> None:
        try:
            self.image = pygame.image.load(path)
        except (pygame.error, FileNotFoundError) as exc:
            raise SpriteSheetError(f"Cannot load sprite sheet {path!r}: {exc}") from exc
        self.path = path
        self.columns = columns
        self.tile_size = tile_size

    def tile_rect(self, index: int) -> pygame.Rect:
        """Source rectangle of tile *index*, counted row by row."""
        return tile_rect(index, self.columns, self.tile_size)

    def tile(self, index: int) -> pygame.Surface:
        rect = self.tile_rect(index)
        if not self.image.get_rect().contains(rect):
            raise SpriteSheetError(
                f"Sprite sheet {self.path!r} of size {self.image.get_size()} "
                f"has no tile {index}.",
            )
        return self.image.subsurface(rect)


def tile_rect(index: int, columns: int, tile_size: int) -> pygame.Rect:
    return pygame.Rect(
        (index % columns) * tile_size,
        (index // columns) * tile_size,
        tile_size,
        tile_size,
    )


class Renderer:
    """Draws a :class:`GridSimulation` onto a surface.

    With a sprite sheet the background, snake, and food use tiles from
    the sheet; otherwise cells are filled with flat colours.
    """

    def __init__(
        self,
        config: GameConfig,
        sprites: SpriteSheet | None = None,
    ) -> None:
        self.config = config
        self.sprites = sprites
        self._background = self._make_tile(
            config.background_sprite, BACKGROUND_COLOR, outline=True,
        )
        self._snake = self._make_tile(config.snake_sprite, SNAKE_COLOR)
        self._food = self._make_tile(config.snake_sprite, FOOD_COLOR)
        self._font: pygame.font.Font | None = None

    def _make_tile(
        self, index: int, color: tuple[int, int, int], outline: bool = False,
    ) -> pygame.Surface:
        size = self.config.cell_size_px
        if self.sprites is not None:
            tile = self.sprites.tile(index)
            if tile.get_size() != (size, size):
                tile = pygame.transform.scale(tile, (size, size))
            return tile
        tile = pygame.Surface((size, size))
        tile.fill(color)
        if outline:
            pygame.draw.rect(tile, GRID_LINE_COLOR, tile.get_rect(), 1)
        return tile

    def cell_origin(self, x: int, y: int) -> tuple[int, int]:
        size = self.config.cell_size_px
        return x * size, y * size

    def draw(self, surface: pygame.Surface, sim: GridSimulation) -> None:
        for y in range(sim.grid.height):
            for x in range(sim.grid.width):
                surface.blit(self._background, self.cell_origin(x, y))
        for x, y in sim.snake_cells():
            surface.blit(self._snake, self.cell_origin(x, y))
        if sim.food is not None:
            surface.blit(self._food, self.cell_origin(*sim.food))

        if sim.is_lost():
            self._draw_message(surface, LOST_MESSAGE)
        elif sim.is_won():
            self._draw_message(surface, WON_MESSAGE)

    def _draw_message(self, surface: pygame.Surface, message: str) -> None:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 16)
        text = self._font.render(message, True, TEXT_COLOR)
        surface.blit(text, (2, 2))


def read_input(events) -> InputFrame:
    """Collect the keys pressed this frame from pygame *events*."""
    directions = set()
    restart = False
    for event in events:
        if event.type != pygame.KEYDOWN:
            continue
        if event.key in _KEY_DIRECTIONS:
            directions.add(_KEY_DIRECTIONS[event.key])
        elif event.key == pygame.K_r:
            restart = True
    return InputFrame(directions=frozenset(directions), restart=restart)


def _wants_quit(events) -> bool:
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False


def run(config: GameConfig) -> int:
    """Open a window and play until it is closed."""
    pygame.init()
    try:
        sprites = None
        if config.sprite_sheet:
            sprites = SpriteSheet(
                config.sprite_sheet, config.sprite_columns, config.cell_size_px,
            )

        width, height = config.screen_size
        window = pygame.display.set_mode(
            (width * config.window_scale, height * config.window_scale),
        )
        pygame.display.set_caption("Grid Snake")
        if sprites is not None:
            sprites.image = sprites.image.convert_alpha()
        board = pygame.Surface((width, height))
        clock = pygame.time.Clock()

        sim = GridSimulation.from_config(config)
        controller = GameController(sim, frames_per_tick=config.frames_per_tick)
        renderer = Renderer(config, sprites)
        sim.restart()
        logger.info("Window opened at %dx%d.", *window.get_size())

        while True:
            events = pygame.event.get()
            if _wants_quit(events):
                break
            controller.update(read_input(events))
            renderer.draw(board, sim)
            pygame.transform.scale(board, window.get_size(), window)
            pygame.display.flip()
            clock.tick(config.fps)
    finally:
        pygame.quit()
    return 0
