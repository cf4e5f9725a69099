from __future__ import annotations

import csv
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from dulp.core.errors import LevelLoadError, UnknownLevel
from dulp.core.palette import COLOR_PALETTE

FULL_TURN = 360
FIRST_LEVEL = 1

_COLUMNS = ("number", "color_slots", "rotation_speed", "projectile_speed", "projectile_distance")

DEFAULT_LEVELS_CSV = Path(__file__).resolve().parents[1] / "assets" / "levels.csv"


@dataclass(frozen=True, slots=True)
class Level:
    """Static layout of one level.

    - `color_slots`: arc of every wheel sector in degrees, in wheel order; they cover a full turn.
    - `rotation_speed`: degrees per second, negative spins the wheel the other way.
    - `projectile_speed`/`projectile_distance`: marker travel, in the same length unit.
    """

    number: int
    color_slots: tuple[int, ...]
    rotation_speed: float
    projectile_speed: float
    projectile_distance: float

    @property
    def sector_count(self) -> int:
        return len(self.color_slots)


@dataclass(frozen=True, slots=True)
class LevelCatalog:
    by_number: dict[int, Level]

    @staticmethod
    def from_levels(levels: Iterable[Level]) -> "LevelCatalog":
        by_number: dict[int, Level] = {}
        for level in levels:
            _validate_level(level)
            if level.number in by_number:
                raise LevelLoadError(f"Duplicate level number: {level.number}")
            by_number[level.number] = level
        if not by_number:
            raise LevelLoadError("Level catalog is empty")
        # New games and every fallback start at the first level.
        if FIRST_LEVEL not in by_number:
            raise LevelLoadError(f"Level catalog has no level {FIRST_LEVEL}")
        return LevelCatalog(by_number=dict(sorted(by_number.items())))

    def level_config(self, level_number: int) -> Level:
        level = self.by_number.get(level_number)
        if level is None:
            raise UnknownLevel(level_number)
        return level

    @property
    def numbers(self) -> tuple[int, ...]:
        return tuple(self.by_number)

    @property
    def last_level(self) -> int:
        return max(self.by_number)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, int) and item in self.by_number

    def __len__(self) -> int:
        return len(self.by_number)


def _validate_level(level: Level) -> None:
    if level.number < 1:
        raise LevelLoadError(f"Level number must be positive: {level.number}")
    if not level.color_slots:
        raise LevelLoadError(f"Level {level.number} has no sectors")
    if len(level.color_slots) > len(COLOR_PALETTE):
        raise LevelLoadError(
            f"Level {level.number} has {len(level.color_slots)} sectors but only {len(COLOR_PALETTE)} colors exist"
        )
    if any(slot <= 0 for slot in level.color_slots):
        raise LevelLoadError(f"Level {level.number} has a non-positive sector arc")
    if sum(level.color_slots) != FULL_TURN:
        raise LevelLoadError(f"Level {level.number} sector arcs sum to {sum(level.color_slots)}, expected {FULL_TURN}")
    if level.projectile_speed <= 0 or level.projectile_distance <= 0:
        raise LevelLoadError(f"Level {level.number} needs a positive projectile speed and distance")


def _parse_row(path: Path, row: dict[str, str]) -> Level:
    try:
        return Level(
            number=int(row["number"]),
            color_slots=tuple(int(s) for s in row["color_slots"].split()),
            rotation_speed=float(row["rotation_speed"]),
            projectile_speed=float(row["projectile_speed"]),
            projectile_distance=float(row["projectile_distance"]),
        )
    except ValueError as e:
        raise LevelLoadError(f"Bad level row in {path}: {row}") from e


def load_level_catalog(path: Path) -> LevelCatalog:
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise LevelLoadError(f"Level file not found: {path}") from e

    reader = csv.DictReader(raw.splitlines())
    header = [c.strip().casefold() for c in (reader.fieldnames or [])]
    missing = [c for c in _COLUMNS if c not in header]
    if missing:
        raise LevelLoadError(f"Missing columns in {path}: {', '.join(missing)}")

    levels: list[Level] = []
    for raw_row in reader:
        row = {k.strip().casefold(): (v or "").strip() for k, v in raw_row.items() if k is not None}
        if not any(row.values()):
            continue
        levels.append(_parse_row(path, row))

    return LevelCatalog.from_levels(levels)


def default_catalog() -> LevelCatalog:
    return load_level_catalog(DEFAULT_LEVELS_CSV)
