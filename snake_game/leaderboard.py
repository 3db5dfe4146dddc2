from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import List, Optional

from snake_game.interfaces import KeyValueStore

logger = logging.getLogger(__name__)


class InvalidPlayerNameError(ValueError):
    pass


@dataclass(frozen=True)
class Player:
    name: str
    score: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidPlayerNameError("player name must not be empty")
        object.__setattr__(self, "name", self.name.strip())


class Leaderboard:
    """Top scores kept as a JSON list of ``{"name", "score"}`` records under one key.

    Entries are always sorted by score, highest first, and capped at ``size``.
    Anything in the store that does not parse as such a list reads as an
    empty leaderboard.
    """

    def __init__(self, store: KeyValueStore, key: str = "snake.leaderboard", size: int = 10) -> None:
        self.store = store
        self.key = key
        self.size = size
        self.entries: List[Player] = []

    def load(self) -> List[Player]:
        self.entries = self._rank(self._read())
        return list(self.entries)

    def save(self, player: Player) -> List[Player]:
        players = self._read()
        players.append(player)
        ranked = self._rank(players)
        self.store.set(self.key, json.dumps([asdict(p) for p in ranked]))
        self.entries = ranked
        logger.info("Saved %s with score %d", player.name, player.score)
        return list(self.entries)

    def best(self) -> Optional[Player]:
        return self.entries[0] if self.entries else None

    def _rank(self, players: List[Player]) -> List[Player]:
        return sorted(players, key=lambda p: p.score, reverse=True)[: self.size]

    def _read(self) -> List[Player]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise ValueError(f"expected a list, got {type(records).__name__}")
            return [_parse_record(record) for record in records]
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            logger.warning("Ignoring unreadable leaderboard under %r: %s", self.key, e)
            return []


def _parse_record(record) -> Player:
    score = record["score"]
    if isinstance(score, bool) or not isinstance(score, int):
        raise TypeError(f"score must be an integer, got {score!r}")
    return Player(name=record["name"], score=score)
