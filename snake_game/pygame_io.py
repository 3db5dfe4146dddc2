from __future__ import annotations

import logging
from typing import Optional

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

from snake_game.interfaces import Color

logger = logging.getLogger(__name__)

BACKGROUND: Color = (20, 20, 20)

if pygame is not None:
    TICK_EVENT = pygame.USEREVENT + 1
else:  # pragma: no cover
    TICK_EVENT = None


def _require_pygame() -> None:
    if pygame is None:
        raise ImportError("pygame is required for the game window")


class PygameTimer:
    """Posts ``TICK_EVENT`` every ``interval_ms``.

    ``pygame.time.set_timer`` replaces the previous timer for the same event
    type, so restarting with a new interval never leaves two timers running.
    """

    def __init__(self, event_type: Optional[int] = None) -> None:
        _require_pygame()
        self.event_type = TICK_EVENT if event_type is None else event_type
        self.interval_ms = 0

    def start(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        pygame.time.set_timer(self.event_type, interval_ms)

    def stop(self) -> None:
        self.interval_ms = 0
        pygame.time.set_timer(self.event_type, 0)


class PygameSurface:
    def __init__(self, surface, background: Color = BACKGROUND) -> None:
        _require_pygame()
        self.surface = surface
        self.background = background

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def clear_rect(self, x: int, y: int, w: int, h: int) -> None:
        self.surface.fill(self.background, pygame.Rect(x, y, w, h))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, w, h))


class BannerNotifier:
    """Keeps the latest message so the window can draw it over the board."""

    def __init__(self) -> None:
        self.message: Optional[str] = None

    def notify(self, message: str) -> None:
        logger.info(message)
        self.message = message

    def clear(self) -> None:
        self.message = None
