"""Clock and repeating-timer abstractions for the game loop.

Contract:
  - `Scheduler.schedule(callback, period_ms)` fires `callback` every `period_ms`
    until the returned handle is cancelled; a cancelled handle never fires again.
  - `Clock.now()` returns milliseconds on a monotonic timeline.

`AsyncioScheduler` + `MonotonicClock` drive the real host; `VirtualClock` is both a
clock and a scheduler that only moves when `advance()` is called.
"""
from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, callback: Callable[[], None], period_ms: float) -> TimerHandle: ...


class Clock(Protocol):
    def now(self) -> float: ...


class MonotonicClock:
    def now(self) -> float:
        return time.monotonic() * 1000


class AsyncioRepeatingTimer:
    def __init__(self, loop: asyncio.AbstractEventLoop, callback: Callable[[], None], period_ms: float) -> None:
        self._loop = loop
        self._callback = callback
        self._period_s = period_ms / 1000
        self._cancelled = False
        self._handle = loop.call_later(self._period_s, self._fire)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        self._handle.cancel()

    def _fire(self) -> None:
        if self._cancelled:
            return
        # Re-arm before running so a callback that cancels the timer cancels the next firing.
        self._handle = self._loop.call_later(self._period_s, self._fire)
        try:
            self._callback()
        except Exception:
            logger.exception("Timer callback failed; cancelling timer")
            self.cancel()
            raise


class AsyncioScheduler:
    """Repeating timers on an asyncio event loop.

    `schedule()` must be called from inside the loop (e.g. an async route handler)
    unless an explicit loop is given.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callable[[], None], period_ms: float) -> AsyncioRepeatingTimer:
        if period_ms <= 0:
            raise ValueError("period_ms must be > 0")
        loop = self._loop or asyncio.get_running_loop()
        return AsyncioRepeatingTimer(loop, callback, period_ms)


class VirtualTimer:
    def __init__(self, clock: "VirtualClock", callback: Callable[[], None], period_ms: float) -> None:
        self._clock = clock
        self.callback = callback
        self.period_ms = period_ms
        self.next_due = clock.now() + period_ms
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class VirtualClock:
    """Manually advanced clock + scheduler for tests and deterministic simulations."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._timers: list[VirtualTimer] = []

    def now(self) -> float:
        return self._now

    def schedule(self, callback: Callable[[], None], period_ms: float) -> VirtualTimer:
        if period_ms <= 0:
            raise ValueError("period_ms must be > 0")
        timer = VirtualTimer(self, callback, period_ms)
        self._timers.append(timer)
        return timer

    @property
    def active_timers(self) -> list[VirtualTimer]:
        self._timers = [t for t in self._timers if not t.cancelled]
        return list(self._timers)

    def advance(self, ms: float) -> int:
        """Move time forward by `ms`, firing every due timer in order. Returns the number of firings."""

        if ms < 0:
            raise ValueError("Cannot move a clock backwards")

        target = self._now + ms
        fired = 0
        while True:
            due = [t for t in self.active_timers if t.next_due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.next_due)
            self._now = timer.next_due
            timer.next_due += timer.period_ms
            timer.callback()
            fired += 1
        self._now = target
        return fired
