from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from dulp.core.errors import InvariantViolation
from dulp.core.fsm import GamePhase
from dulp.core.levels import FIRST_LEVEL
from dulp.core.session import GameSession
from dulp.game import Game

logger = logging.getLogger(__name__)


class MenuAction(StrEnum):
    new_game = "newgame"
    continue_game = "continue"
    pause = "pause"
    continue_pause = "continue-pause"
    exit_win = "exit-win"
    exit = "exit"
    next_level = "nextlevel"
    try_again = "tryagain"


def _current_level(game: Game) -> int:
    session = game.controller.session
    if session is None:
        raise ValueError("No level in progress")
    return session.level_number


def _won_level(game: Game, act: MenuAction) -> int:
    level = _current_level(game)
    phase = game.controller.phase
    if phase is not GamePhase.won:
        raise ValueError(f"'{act.value}' needs a won level, not one that is {phase.value}")
    return level


def _back_to_start(game: Game) -> None:
    game.controller.reset()
    game.presenter.show_start_screen()
    game.presenter.reflect_continuable(game.progress.has_saved_level())


def dispatch_menu_action(game: Game, action: MenuAction | str) -> GameSession | None:
    """Apply one menu button press.

    Raises ValueError for unknown actions, actions that need a level in progress, and
    `exit-win`/`nextlevel` on a level that was not won. Raises UnknownLevel when
    `nextlevel` runs past the last level.
    """

    try:
        act = MenuAction(action)
    except ValueError as e:
        raise ValueError(f"Unknown action: {action}") from e

    controller = game.controller

    if act is MenuAction.new_game:
        game.progress.clear()
        return controller.start(FIRST_LEVEL)

    if act is MenuAction.continue_game:
        return controller.resume_from_saved_level()

    if act is MenuAction.pause:
        controller.pause()
        return controller.session

    if act is MenuAction.continue_pause:
        controller.resume()
        return controller.session

    if act is MenuAction.exit_win:
        game.progress.advance(_won_level(game, act) + 1)
        _back_to_start(game)
        return None

    if act is MenuAction.exit:
        _back_to_start(game)
        return None

    if act is MenuAction.next_level:
        nxt = _won_level(game, act) + 1
        # Validate before saving so progress never points past the catalog.
        controller.catalog.level_config(nxt)
        game.progress.advance(nxt)
        return controller.start(nxt)

    if act is MenuAction.try_again:
        return controller.start(_current_level(game))

    raise InvariantViolation(f"Unhandled menu action: {act}")


def restore_location(game: Game, state: Mapping[str, Any]) -> GameSession | None:
    """Re-enter the level recorded in a navigation entry, paused."""

    level = state.get("level")
    if not isinstance(level, int) or isinstance(level, bool) or level < 1:
        logger.debug("Nothing to restore from %r", dict(state))
        return None

    session = game.controller.start(level)
    game.controller.pause()
    return session
