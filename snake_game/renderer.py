from __future__ import annotations

from snake_game.config import GameConfig
from snake_game.game import NO_FOOD, SnakeGame
from snake_game.interfaces import Color, DrawingSurface

SNAKE_COLOR: Color = (0, 128, 0)
FOOD_COLOR: Color = (255, 0, 0)


class Renderer:
    """Draws the board as grid-aligned squares. Reads the game, never changes it."""

    def __init__(self, surface: DrawingSurface, config: GameConfig = GameConfig()) -> None:
        self.surface = surface
        self.cell_size = config.cell_size
        self.snake_size = config.snake_size
        self.food_size = config.food_size

    def draw(self, game: SnakeGame) -> None:
        self.surface.clear_rect(0, 0, self.surface.width, self.surface.height)

        for x, y in game.snake:
            self._square(x, y, self.snake_size, SNAKE_COLOR)

        if game.food != NO_FOOD:
            fx, fy = game.food
            self._square(fx, fy, self.food_size, FOOD_COLOR)

    def _square(self, x: int, y: int, size: int, color: Color) -> None:
        self.surface.fill_rect(x * self.cell_size, y * self.cell_size, size, size, color)
