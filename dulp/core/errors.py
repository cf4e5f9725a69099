from __future__ import annotations


class DulpError(Exception):
    """Base class for all game errors."""


class UnknownLevel(DulpError, LookupError):
    """No configuration exists for the requested level number."""

    def __init__(self, level_number: int) -> None:
        self.level_number = level_number
        super().__init__(f"Level {level_number} not found")


class LevelLoadError(DulpError, ValueError):
    pass


class InvariantViolation(DulpError):
    """A broken internal invariant (construction bug). Never swallowed."""
