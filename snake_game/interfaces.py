from __future__ import annotations

from typing import Optional, Protocol, Tuple

Color = Tuple[int, int, int]


class RandomSource(Protocol):
    """Anything with ``randrange``; ``random.Random`` qualifies."""

    def randrange(self, stop: int) -> int: ...


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class Scheduler(Protocol):
    """Repeating tick timer. ``start`` replaces any running timer."""

    interval_ms: int

    def start(self, interval_ms: int) -> None: ...
    def stop(self) -> None: ...


class DrawingSurface(Protocol):
    width: int
    height: int

    def clear_rect(self, x: int, y: int, w: int, h: int) -> None: ...
    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...
