from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    label: str
    path: str
    state: dict[str, Any] = field(default_factory=dict)


class InMemoryHistory:
    """Single-entry location bookkeeping, mirrored to the UI for its address bar."""

    def __init__(self) -> None:
        self.current: HistoryEntry | None = None

    def replace_current_entry(self, label: str, path: str, state: Mapping[str, Any]) -> None:
        self.current = HistoryEntry(label=label, path=path, state=dict(state))
