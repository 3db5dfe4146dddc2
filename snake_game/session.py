from __future__ import annotations

import enum
import logging
from typing import Optional

from snake_game.config import GameConfig
from snake_game.game import DIRECTIONS, StepResult, SnakeGame, Vec2, orthogonal
from snake_game.interfaces import Notifier, RandomSource, Scheduler
from snake_game.leaderboard import InvalidPlayerNameError, Leaderboard, Player
from snake_game.renderer import Renderer

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    "ArrowUp": DIRECTIONS["UP"],
    "ArrowDown": DIRECTIONS["DOWN"],
    "ArrowLeft": DIRECTIONS["LEFT"],
    "ArrowRight": DIRECTIONS["RIGHT"],
}


class LogNotifier:
    def notify(self, message: str) -> None:
        logger.info(message)


class State(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameSession:
    """Runs rounds of Snake: start, timer ticks, key input, game over.

    The session owns the game, the tick scheduler and the leaderboard. Ticks and
    key presses both arrive on the event loop thread, so neither can observe the
    other half way through an update.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        leaderboard: Leaderboard,
        notifier: Notifier,
        config: GameConfig = GameConfig(),
        rng: Optional[RandomSource] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.config = config
        self.scheduler = scheduler
        self.leaderboard = leaderboard
        self.notifier = notifier
        self.renderer = renderer
        self.game = SnakeGame(grid_size=config.grid_size, rng=rng)

        self.state = State.IDLE
        self.player: Optional[Player] = None
        self.speed = config.initial_speed
        self.pending_direction: Vec2 = self.game.direction
        self.last_result: Optional[StepResult] = None

        self.leaderboard.load()

    @property
    def running(self) -> bool:
        return self.state is State.RUNNING

    @property
    def score(self) -> int:
        return self.game.score

    def start(self, name: str) -> bool:
        if self.running:
            return False
        try:
            player = Player(name)
        except InvalidPlayerNameError:
            logger.warning("Refusing to start without a player name")
            self.notifier.notify("Please enter your name to start.")
            return False

        self.player = player
        self.game.reset()
        self.pending_direction = self.game.direction
        self.last_result = None
        self.state = State.RUNNING
        self._set_speed(self.config.initial_speed)
        logger.info("Game started for %s", player.name)
        if self.renderer is not None:
            self.renderer.draw(self.game)
        return True

    def reset(self) -> None:
        if self.state is State.GAME_OVER:
            self.state = State.IDLE

    def handle_key(self, key: str) -> bool:
        if not self.running:
            return False
        direction = KEY_DIRECTIONS.get(key)
        if direction is None or not orthogonal(direction, self.game.direction):
            return False
        self.pending_direction = direction
        return True

    def tick(self) -> Optional[StepResult]:
        if not self.running:
            return None

        result = self.game.step(self.pending_direction)
        self.last_result = result

        if result.collision:
            self._game_over()
        elif result.ate_food and result.score % self.config.speed_threshold == 0:
            speed = self.config.speed_for_score(result.score)
            if speed != self.speed:
                self._set_speed(speed)

        if self.renderer is not None:
            self.renderer.draw(self.game)
        return result

    def _set_speed(self, speed: int) -> None:
        logger.info("Tick interval set to %d ms", speed)
        self.speed = speed
        self.scheduler.start(speed)

    def _game_over(self) -> None:
        self.scheduler.stop()
        self.state = State.GAME_OVER
        assert self.player is not None
        final = Player(self.player.name, self.game.score)
        logger.info("Game over for %s with score %d", final.name, final.score)
        try:
            self.leaderboard.save(final)
        except OSError:
            logger.exception("Could not save score for %s", final.name)
        self.notifier.notify(f"Game Over! Score: {final.score}")
