from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from dulp.core.levels import Level


class ProjectileModel:
    """Headless marker magazine and flight.

    One marker per sector color, fired front to back. A flight ends when the
    marker has covered `projectile_distance`; `reset_flight()` consumes the
    landed marker and loads the next one.
    """

    def __init__(self) -> None:
        self.magazine: deque[str] = deque()
        self.position = 0.0
        self._speed = 0.0
        self._distance = 0.0

    def render_projectile(self, level: Level, colors: Sequence[str]) -> None:
        self.magazine = deque(colors)
        self.position = 0.0
        self._speed = level.projectile_speed
        self._distance = level.projectile_distance

    def advance_projectile(self, delta_ms: float) -> None:
        self.position = min(self._distance, self.position + self._speed * delta_ms / 1000)

    def has_arrived(self) -> bool:
        return self._distance > 0 and self.position >= self._distance

    def active_color(self) -> str | None:
        return self.magazine[0] if self.magazine else None

    def reset_flight(self) -> None:
        if self.magazine:
            self.magazine.popleft()
        self.position = 0.0

    def clear(self) -> None:
        self.magazine.clear()
        self.position = 0.0
        self._speed = 0.0
        self._distance = 0.0
