from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from functools import partial

from statemachine.exceptions import TransitionNotAllowed

from dulp.core.collaborators import NavigationHistory, Presenter, ProjectileRenderer, WheelRenderer
from dulp.core.errors import InvariantViolation, UnknownLevel
from dulp.core.fsm import GameFSM, GamePhase
from dulp.core.hits import HitResult, resolve
from dulp.core.levels import FIRST_LEVEL, LevelCatalog
from dulp.core.palette import COLOR_PALETTE, select_colors
from dulp.core.scheduling import Clock, Scheduler
from dulp.core.session import GameSession, Outcome
from dulp.progress import SessionState

logger = logging.getLogger(__name__)

TICK_PERIOD_MS = 25


class GameLoopController:
    """Owns the single live `GameSession` and the fixed-cadence tick that drives it.

    All entry points (`start`, `tick`, `arm`, `pause`, `resume`, `reset`) are expected to be
    called from one thread of control; the host serializes timer callbacks and input.
    """

    def __init__(
        self,
        *,
        catalog: LevelCatalog,
        wheel: WheelRenderer,
        projectile: ProjectileRenderer,
        presenter: Presenter,
        history: NavigationHistory,
        progress: SessionState,
        scheduler: Scheduler,
        clock: Clock,
        rng: random.Random | None = None,
        palette: Sequence[str] = COLOR_PALETTE,
    ) -> None:
        self.catalog = catalog
        self.wheel = wheel
        self.projectile = projectile
        self.presenter = presenter
        self.history = history
        self.progress = progress
        self.scheduler = scheduler
        self.clock = clock
        self.rng = rng or random.Random()
        self.palette = tuple(palette)
        self.fsm = GameFSM()
        self.session: GameSession | None = None

    @property
    def phase(self) -> GamePhase:
        return self.fsm.phase

    def _transition(self, event: str) -> None:
        try:
            self.fsm.send(event)
        except TransitionNotAllowed as e:
            raise InvariantViolation(f"'{event}' is not allowed while {self.phase.value}") from e

    def _navigate(self, suffix: str = "") -> None:
        assert self.session is not None
        n = self.session.level_number
        label = f"Level {n}" + (f" | {suffix.capitalize()}" if suffix else "")
        path = f"#level/{n}" + (f"/{suffix}" if suffix else "")
        self.history.replace_current_entry(f"Dulp | {label}", path, {"level": n})

    # ---- lifecycle ----

    def start(self, level_number: int) -> GameSession:
        # Look the level up first so an unknown level leaves the current session alone.
        level = self.catalog.level_config(level_number)
        colors = select_colors(self.palette, level.sector_count, self.rng)

        self._end_session()

        self.wheel.render_sectors(level, colors)
        self.projectile.render_projectile(level, colors)

        session = GameSession(level=level, colors=colors, last_tick_ms=self.clock.now())
        self.session = session
        self._transition("level_started")
        session.timer = self.scheduler.schedule(partial(self._on_timer, session), TICK_PERIOD_MS)
        session.record("LEVEL_STARTED", colors=list(colors))

        self._navigate()
        self.presenter.show_play_screen()
        logger.info("Started level %s with %s sectors", level_number, level.sector_count)
        return session

    def reset(self) -> None:
        self._end_session()

    def _end_session(self) -> None:
        session = self.session
        if session is None:
            return
        session.cancel_timer()
        self.projectile.clear()
        self.wheel.clear()
        self.session = None
        if self.phase is not GamePhase.idle:
            self._transition("session_reset")

    def resume_from_saved_level(self) -> GameSession:
        level_number = self.progress.current_level()
        try:
            return self.start(level_number)
        except UnknownLevel:
            logger.warning("Saved level %s no longer exists; falling back to level %s", level_number, FIRST_LEVEL)
            self.progress.clear()
            return self.start(FIRST_LEVEL)

    # ---- timing ----

    def _on_timer(self, session: GameSession) -> None:
        if session is not self.session:
            raise InvariantViolation(f"Tick for a cancelled level {session.level_number} session")
        try:
            self.tick()
        except InvariantViolation:
            logger.error("Aborting level %s session", session.level_number)
            self._end_session()
            raise

    def tick(self) -> None:
        session = self.session
        if session is None or session.is_over:
            return

        now = self.clock.now()
        delta = now - session.last_tick_ms
        # Updated even while paused so the paused span is never simulated on resume.
        session.last_tick_ms = now
        if session.is_paused:
            return

        self.wheel.advance_rotation(delta)
        if not session.fire_armed:
            return

        self.projectile.advance_projectile(delta)
        if self.projectile.has_arrived():
            self.on_arrival()

    # ---- input ----

    def arm(self) -> bool:
        session = self.session
        if session is None or self.phase is not GamePhase.playing or session.is_paused:
            logger.debug("Fire ignored while %s", self.phase.value)
            return False
        if session.fire_armed:
            logger.debug("Fire ignored: marker already in flight")
            return False

        session.fire_armed = True
        session.record("FLIGHT_ARMED", color=self.projectile.active_color())
        return True

    def pause(self) -> bool:
        session = self.session
        if session is None or self.phase is not GamePhase.playing:
            logger.debug("Pause ignored while %s", self.phase.value)
            return False

        session.is_paused = True
        self._transition("pause_requested")
        session.record("PAUSED")
        self._navigate("paused")
        self.presenter.show_pause_screen()
        return True

    def resume(self) -> bool:
        session = self.session
        if session is None or self.phase is not GamePhase.paused:
            logger.debug("Resume ignored while %s", self.phase.value)
            return False

        session.is_paused = False
        self._transition("resume_requested")
        session.record("RESUMED")
        self._navigate()
        self.presenter.show_play_screen()
        return True

    # ---- outcome ----

    def on_arrival(self) -> HitResult:
        session = self.session
        if session is None or not session.fire_armed or session.is_over:
            raise InvariantViolation("Marker arrival without an armed flight")

        exposed = self.wheel.exposed_sector_color()
        marker = self.projectile.active_color()
        result = resolve(exposed, marker)

        if result is HitResult.miss:
            session.fire_armed = False
            self._finish(session, Outcome.lost, exposed=exposed, marker=marker)
            return result

        session.fire_armed = False
        self.wheel.remove_exposed_sector()
        self.projectile.reset_flight()
        remaining = self.wheel.remaining_sector_count()
        session.record("SECTOR_HIT", color=marker, remaining=remaining)
        logger.debug("Hit %s, %s sectors left", marker, remaining)

        if remaining == 0:
            self._finish(session, Outcome.won)
        return result

    def _finish(self, session: GameSession, outcome: Outcome, **payload: object) -> None:
        session.cancel_timer()
        session.outcome = outcome
        if outcome is Outcome.won:
            self._transition("level_won")
            session.record("LEVEL_WON")
            self._navigate("win")
            self.presenter.show_win_screen()
        else:
            self._transition("level_lost")
            session.record("LEVEL_LOST", **payload)
            self._navigate("lose")
            self.presenter.show_lose_screen()
        logger.info("Level %s %s", session.level_number, outcome.value)
