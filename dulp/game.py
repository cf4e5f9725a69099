from __future__ import annotations

import random
from dataclasses import dataclass

from dulp.core.collaborators import KeyValueStore
from dulp.core.game_loop import GameLoopController
from dulp.core.levels import LevelCatalog
from dulp.core.projectile import ProjectileModel
from dulp.core.scheduling import Clock, Scheduler
from dulp.core.wheel import WheelModel
from dulp.navigation import InMemoryHistory
from dulp.presentation import ScreenPresenter
from dulp.progress import DEFAULT_PROGRESS_KEY, SessionState


@dataclass(slots=True)
class Game:
    """One controller wired to the headless collaborators it drives."""

    controller: GameLoopController
    wheel: WheelModel
    projectile: ProjectileModel
    presenter: ScreenPresenter
    history: InMemoryHistory
    progress: SessionState

    def snapshot(self) -> dict[str, object]:
        session = self.controller.session
        return {
            "phase": self.controller.phase.value,
            "level_number": session.level_number if session else None,
            "is_paused": session.is_paused if session else False,
            "fire_armed": session.fire_armed if session else False,
            "outcome": session.outcome.value if session else None,
            "sector_colors": list(self.wheel.remaining_colors()),
            "remaining_sectors": self.wheel.remaining_sector_count(),
            "exposed_color": self.wheel.exposed_sector_color(),
            "rotation": self.wheel.rotation,
            "projectile_color": self.projectile.active_color(),
            "projectile_position": self.projectile.position,
            "screen": self.presenter.screen.value,
            "continuable": self.presenter.continuable,
            "location": self.history.current.path if self.history.current else None,
        }


def build_game(
    *,
    store: KeyValueStore,
    catalog: LevelCatalog,
    scheduler: Scheduler,
    clock: Clock,
    presenter: ScreenPresenter | None = None,
    rng: random.Random | None = None,
    progress_key: str = DEFAULT_PROGRESS_KEY,
) -> Game:
    wheel = WheelModel()
    projectile = ProjectileModel()
    screens = presenter or ScreenPresenter()
    history = InMemoryHistory()
    progress = SessionState(store, key=progress_key)

    controller = GameLoopController(
        catalog=catalog,
        wheel=wheel,
        projectile=projectile,
        presenter=screens,
        history=history,
        progress=progress,
        scheduler=scheduler,
        clock=clock,
        rng=rng,
    )
    screens.reflect_continuable(progress.has_saved_level())
    return Game(
        controller=controller,
        wheel=wheel,
        projectile=projectile,
        presenter=screens,
        history=history,
        progress=progress,
    )
