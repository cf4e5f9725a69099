from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dulp.core.errors import InvariantViolation
from dulp.core.levels import FULL_TURN, Level

# The marker travels up from below the wheel, so it lands on whatever sector covers this angle.
EXPOSED_ANGLE = 180.0


@dataclass(slots=True)
class Sector:
    color: str
    start: float
    arc: float

    def covers(self, angle: float) -> bool:
        return (angle - self.start) % FULL_TURN < self.arc


class WheelModel:
    """Headless wheel: sector layout plus rotation.

    Removing a sector leaves a gap; the remaining sectors keep their arcs, so the
    exposed position can be empty (`exposed_sector_color()` returns None).
    """

    def __init__(self) -> None:
        self.sectors: list[Sector] = []
        self.rotation = 0.0
        self._speed = 0.0

    def render_sectors(self, level: Level, colors: Sequence[str]) -> None:
        if len(colors) != level.sector_count:
            raise InvariantViolation(f"{len(colors)} colors for {level.sector_count} sectors")

        self.sectors = []
        start = 0.0
        for color, arc in zip(colors, level.color_slots, strict=True):
            self.sectors.append(Sector(color=color, start=start, arc=float(arc)))
            start += arc
        self.rotation = 0.0
        self._speed = level.rotation_speed

    def advance_rotation(self, delta_ms: float) -> None:
        self.rotation = (self.rotation + self._speed * delta_ms / 1000) % FULL_TURN

    def _exposed_index(self) -> int | None:
        # Position on the unrotated wheel that currently sits at the exposed angle.
        angle = (EXPOSED_ANGLE - self.rotation) % FULL_TURN
        for idx, sector in enumerate(self.sectors):
            if sector.covers(angle):
                return idx
        return None

    def exposed_sector_color(self) -> str | None:
        idx = self._exposed_index()
        return None if idx is None else self.sectors[idx].color

    def remove_exposed_sector(self) -> None:
        idx = self._exposed_index()
        if idx is None:
            raise InvariantViolation("No exposed sector to remove")
        del self.sectors[idx]

    def remaining_sector_count(self) -> int:
        return len(self.sectors)

    def remaining_colors(self) -> tuple[str, ...]:
        return tuple(s.color for s in self.sectors)

    def clear(self) -> None:
        self.sectors = []
        self.rotation = 0.0
        self._speed = 0.0
