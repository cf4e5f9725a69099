from __future__ import annotations

import random

from dulp.config import create_progress_store, get_levels_csv, get_progress_key
from dulp.core.levels import default_catalog, load_level_catalog
from dulp.core.scheduling import AsyncioScheduler, MonotonicClock
from dulp.game import Game, build_game
from dulp.presentation import ScreenPresenter
from dulp.websocket_hub import hub

_GAME: Game | None = None


def init_game() -> Game:
    """Build the process-wide game once and cache it.

    Safe to call multiple times; subsequent calls return the already built instance.
    """

    global _GAME
    if _GAME is None:
        csv_path = get_levels_csv()
        catalog = load_level_catalog(csv_path) if csv_path else default_catalog()
        _GAME = build_game(
            store=create_progress_store(),
            catalog=catalog,
            scheduler=AsyncioScheduler(),
            clock=MonotonicClock(),
            presenter=ScreenPresenter(on_change=hub.publish),
            rng=random.Random(),
            progress_key=get_progress_key(),
        )
    return _GAME


def shutdown_game() -> None:
    """Drop the cached game, cancelling its timer."""

    global _GAME
    if _GAME is not None:
        _GAME.controller.reset()
    _GAME = None


def get_game() -> Game:
    if _GAME is None:
        raise RuntimeError("Game not initialized. Call init_game() at startup.")
    return _GAME


def install_game(game: Game) -> Game:
    """Use a prebuilt game (fake store, virtual clock) instead of building one from the environment."""

    global _GAME
    shutdown_game()
    _GAME = game
    return game
