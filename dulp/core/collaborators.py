"""Contracts for everything the game loop drives but does not own.

Concrete headless implementations live in `dulp.core.wheel`, `dulp.core.projectile`,
`dulp.presentation`, and `dulp.navigation`. A redis client satisfies `KeyValueStore`.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from dulp.core.levels import Level


class WheelRenderer(Protocol):
    def render_sectors(self, level: Level, colors: Sequence[str]) -> None: ...

    def advance_rotation(self, delta_ms: float) -> None: ...

    def exposed_sector_color(self) -> str | None: ...

    def remove_exposed_sector(self) -> None: ...

    def remaining_sector_count(self) -> int: ...

    def clear(self) -> None: ...


class ProjectileRenderer(Protocol):
    def render_projectile(self, level: Level, colors: Sequence[str]) -> None: ...

    def advance_projectile(self, delta_ms: float) -> None: ...

    def has_arrived(self) -> bool: ...

    def active_color(self) -> str | None: ...

    def reset_flight(self) -> None: ...

    def clear(self) -> None: ...


class Presenter(Protocol):
    def show_play_screen(self) -> None: ...

    def show_pause_screen(self) -> None: ...

    def show_win_screen(self) -> None: ...

    def show_lose_screen(self) -> None: ...

    def show_start_screen(self) -> None: ...

    def reflect_continuable(self, continuable: bool) -> None: ...


class KeyValueStore(Protocol):
    def get(self, name: str) -> Any: ...

    def set(self, name: str, value: str) -> Any: ...

    def delete(self, *names: str) -> Any: ...


class NavigationHistory(Protocol):
    def replace_current_entry(self, label: str, path: str, state: Mapping[str, Any]) -> None: ...
