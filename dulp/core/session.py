from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from dulp.core.events import EventType, GameEvent
from dulp.core.levels import Level
from dulp.core.scheduling import TimerHandle


class Outcome(StrEnum):
    continuing = "continuing"
    won = "won"
    lost = "lost"


@dataclass(slots=True)
class GameSession:
    level: Level
    colors: tuple[str, ...]
    last_tick_ms: float
    is_paused: bool = False
    fire_armed: bool = False
    outcome: Outcome = Outcome.continuing
    timer: TimerHandle | None = None
    events: list[GameEvent] = field(default_factory=list)

    @property
    def level_number(self) -> int:
        return self.level.number

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.continuing

    def record(self, type: EventType, **payload: object) -> GameEvent:
        event = GameEvent.now(type=type, level_number=self.level_number, payload=dict(payload))
        self.events.append(event)
        return event

    def cancel_timer(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None
