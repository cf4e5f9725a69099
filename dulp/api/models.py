from __future__ import annotations

from pydantic import BaseModel, Field

from dulp.core.fsm import GamePhase
from dulp.core.session import Outcome
from dulp.presentation import Screen


class StartRequest(BaseModel):
    level_number: int = Field(..., ge=1)


class RestoreRequest(BaseModel):
    level: int = Field(..., ge=1)


class FireResponse(BaseModel):
    armed: bool


class GameSnapshot(BaseModel):
    phase: GamePhase
    level_number: int | None = None
    is_paused: bool = False
    fire_armed: bool = False
    outcome: Outcome | None = None

    # Remaining sectors in wheel order.
    sector_colors: list[str] = Field(default_factory=list)
    remaining_sectors: int = 0
    exposed_color: str | None = None
    rotation: float = 0.0

    projectile_color: str | None = None
    projectile_position: float = 0.0

    screen: Screen = Screen.start
    continuable: bool = False

    # Address-bar style location of the current screen, e.g. "#level/3/paused".
    location: str | None = None


class LevelInfo(BaseModel):
    number: int
    sector_count: int
    rotation_speed: float


class LevelListResponse(BaseModel):
    levels: list[LevelInfo]
