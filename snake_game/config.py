from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = 20
    cell_size: int = 20
    snake_size: int = 15
    food_size: int = 10
    initial_speed: int = 200  # tick interval in ms
    speed_threshold: int = 5  # foods eaten per speed step
    speed_decrement: int = 20
    min_speed: int = 50
    leaderboard_key: str = "snake.leaderboard"
    leaderboard_size: int = 10

    @property
    def window_size(self) -> Tuple[int, int]:
        side = self.grid_size * self.cell_size
        return side, side

    def speed_for_score(self, score: int) -> int:
        """Tick interval after ``score`` foods: a linear ramp clamped at ``min_speed``."""
        steps = score // self.speed_threshold
        return max(self.min_speed, self.initial_speed - steps * self.speed_decrement)
