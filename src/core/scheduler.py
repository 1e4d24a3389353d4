# src/core/scheduler.py
"""
Tick schedulers.

The engine never sleeps or owns a timer. A scheduler only answers "how many
ticks are owed right now?", so the dashboard can poll it from a periodic
Streamlit fragment and tests can hand out ticks by hand.
"""
from __future__ import annotations

import math
import time
from typing import Callable, Optional, Protocol

from src.config import settings


class TickScheduler(Protocol):
    @property
    def is_active(self) -> bool: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def due_ticks(self) -> int: ...


class WallClockScheduler:
    """
    One tick per `interval_s` of wall-clock time since `start()`.

    `time_fn` defaults to time.monotonic and can be replaced by a fake clock.
    Once `stop()` returns, `due_ticks()` reports 0 until the next `start()`.
    """

    def __init__(
        self,
        time_fn: Callable[[], float] = time.monotonic,
        interval_s: float = settings.TICK_INTERVAL_S,
        max_catch_up: Optional[int] = settings.MAX_CATCH_UP_TICKS,
    ) -> None:
        if interval_s <= 0:
            raise ValueError("interval_s must be positive")
        self._time_fn = time_fn
        self.interval_s = float(interval_s)
        self.max_catch_up = max_catch_up
        self._anchor: Optional[float] = None
        self._handed_out = 0

    @property
    def is_active(self) -> bool:
        return self._anchor is not None

    def start(self) -> None:
        if self._anchor is None:
            self._anchor = self._time_fn()
            self._handed_out = 0

    def stop(self) -> None:
        self._anchor = None
        self._handed_out = 0

    def due_ticks(self) -> int:
        if self._anchor is None:
            return 0
        elapsed = self._time_fn() - self._anchor
        owed = math.floor(elapsed / self.interval_s) - self._handed_out
        if owed <= 0:
            return 0
        if self.max_catch_up is not None and owed > self.max_catch_up:
            # Drop the backlog beyond the cap instead of replaying it later.
            self._handed_out += owed - self.max_catch_up
            owed = self.max_catch_up
        self._handed_out += owed
        return owed


class ManualScheduler:
    """Scheduler driven explicitly with `advance(n)`; used by tests."""

    def __init__(self) -> None:
        self._active = False
        self._pending = 0

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        self._active = True

    def stop(self) -> None:
        self._active = False
        self._pending = 0

    def advance(self, ticks: int = 1) -> None:
        if ticks < 0:
            raise ValueError("ticks must be non-negative")
        if self._active:
            self._pending += ticks

    def due_ticks(self) -> int:
        if not self._active:
            return 0
        owed, self._pending = self._pending, 0
        return owed
