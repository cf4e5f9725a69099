from __future__ import annotations

from dulp.game import Game
from dulp.runtime import get_game


def get_current_game() -> Game:
    return get_game()
