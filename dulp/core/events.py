from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

EventType = Literal[
    "LEVEL_STARTED",
    "FLIGHT_ARMED",
    "SECTOR_HIT",
    "LEVEL_WON",
    "LEVEL_LOST",
    "PAUSED",
    "RESUMED",
]


@dataclass(frozen=True, slots=True)
class GameEvent:
    type: EventType
    level_number: int
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, level_number: int, payload: dict[str, Any] | None = None) -> "GameEvent":
        return GameEvent(type=type, level_number=level_number, payload=payload or {}, ts=datetime.now(timezone.utc))
