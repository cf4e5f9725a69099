from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any


class Screen(StrEnum):
    start = "start"
    play = "play"
    pause = "pause"
    win = "win"
    lose = "lose"


class ScreenPresenter:
    """Tracks which screen the UI should show and forwards every change to `on_change`."""

    def __init__(self, on_change: Callable[[dict[str, Any]], None] | None = None) -> None:
        self.screen = Screen.start
        self.continuable = False
        self.on_change = on_change

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change({"type": "screen", "screen": self.screen.value, "continuable": self.continuable})

    def _show(self, screen: Screen) -> None:
        self.screen = screen
        self._notify()

    def show_play_screen(self) -> None:
        self._show(Screen.play)

    def show_pause_screen(self) -> None:
        self._show(Screen.pause)

    def show_win_screen(self) -> None:
        self._show(Screen.win)

    def show_lose_screen(self) -> None:
        self._show(Screen.lose)

    def show_start_screen(self) -> None:
        self._show(Screen.start)

    def reflect_continuable(self, continuable: bool) -> None:
        self.continuable = continuable
        self._notify()
