from __future__ import annotations

import logging

import redis

from dulp.core.collaborators import KeyValueStore
from dulp.core.levels import FIRST_LEVEL

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_KEY = "dulp:levelNumber"


class SessionState:
    """Which level to resume from, persisted as a plain integer string.

    Storage is a convenience: unreadable or missing values mean "no saved progress",
    and a failing store never interrupts the game.
    """

    def __init__(self, store: KeyValueStore, *, key: str = DEFAULT_PROGRESS_KEY) -> None:
        self.store = store
        self.key = key

    def saved_level(self) -> int | None:
        try:
            raw = self.store.get(self.key)
        except redis.RedisError as e:
            logger.warning("Progress store unavailable, treating as no saved progress: %s", e)
            return None

        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        try:
            level = int(str(raw).strip())
        except ValueError:
            logger.warning("Ignoring unreadable saved level %r", raw)
            return None
        if level < 0:
            logger.warning("Ignoring negative saved level %r", raw)
            return None
        return level

    def has_saved_level(self) -> bool:
        return self.saved_level() is not None

    def current_level(self) -> int:
        level = self.saved_level()
        # 0 is a valid stored value but not a playable level.
        return level if level else FIRST_LEVEL

    def advance(self, level_number: int) -> None:
        if level_number < 0:
            raise ValueError("level_number must be >= 0")
        try:
            self.store.set(self.key, str(level_number))
        except redis.RedisError as e:
            logger.warning("Could not save progress (level %s): %s", level_number, e)

    def clear(self) -> None:
        try:
            self.store.delete(self.key)
        except redis.RedisError as e:
            logger.warning("Could not clear saved progress: %s", e)
