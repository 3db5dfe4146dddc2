from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, Tuple

from snake_game.interfaces import RandomSource

logger = logging.getLogger(__name__)

Vec2 = Tuple[int, int]

NO_FOOD: Vec2 = (-1, -1)


def add_pos(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def orthogonal(a: Vec2, b: Vec2) -> bool:
    return a[0] * b[0] + a[1] * b[1] == 0


DIRECTIONS = {
    "UP": (0, -1),
    "RIGHT": (1, 0),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
}


@dataclass
class StepResult:
    snake: List[Vec2]
    food: Vec2
    score: int
    done: bool
    ate_food: bool
    collision: bool


class SnakeGame:
    """Board state for one round: the snake, its heading, the food and the score.

    The snake is stored head first. ``step`` advances exactly one tick and never
    leaves two segments on the same cell: a move into a wall or into the body
    ends the round instead.
    """

    def __init__(
        self,
        grid_size: int = 20,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.grid_size = grid_size
        self.random: RandomSource = rng if rng is not None else random.Random(seed)

        self.snake: Deque[Vec2] = deque()
        self.direction: Vec2 = DIRECTIONS["RIGHT"]
        self.food: Vec2 = NO_FOOD
        self.score = 0
        self.done = False

        self.reset()

    def reset(
        self,
        snake: Optional[Iterable[Vec2]] = None,
        direction: Vec2 = DIRECTIONS["RIGHT"],
        food: Optional[Vec2] = None,
    ) -> StepResult:
        self.snake.clear()
        if snake is None:
            center = self.grid_size // 2
            self.snake.append((center, center))
        else:
            self.snake.extend(snake)
            if not self.snake:
                raise ValueError("snake needs at least one segment")
        self.direction = direction

        self.score = 0
        self.done = False
        self.food = food if food is not None else self._random_food()

        return self._result(ate_food=False, collision=False)

    def _random_food(self) -> Vec2:
        if len(self.snake) >= self.grid_size * self.grid_size:
            return NO_FOOD
        occupied = set(self.snake)
        while True:
            candidate = (
                self.random.randrange(self.grid_size),
                self.random.randrange(self.grid_size),
            )
            if candidate not in occupied:
                logger.debug("Food placed at %s", candidate)
                return candidate

    def in_bounds(self, pos: Vec2) -> bool:
        x, y = pos
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def step(self, new_direction: Optional[Vec2] = None) -> StepResult:
        if self.done:
            return self._result(ate_food=False, collision=True)

        if new_direction and orthogonal(new_direction, self.direction):
            self.direction = new_direction

        new_head = add_pos(self.snake[0], self.direction)

        if self._is_collision(new_head):
            self.done = True
            return self._result(ate_food=False, collision=True)

        self.snake.appendleft(new_head)
        ate_food = False

        if new_head == self.food:
            self.score += 1
            ate_food = True
            self.food = self._random_food()
        else:
            self.snake.pop()

        return self._result(ate_food=ate_food, collision=False)

    def _is_collision(self, pos: Vec2) -> bool:
        # The tail still counts: it only moves after the head has been checked.
        return not self.in_bounds(pos) or pos in self.snake

    def _result(self, ate_food: bool, collision: bool) -> StepResult:
        return StepResult(
            snake=list(self.snake),
            food=self.food,
            score=self.score,
            done=self.done,
            ate_food=ate_food,
            collision=collision,
        )
