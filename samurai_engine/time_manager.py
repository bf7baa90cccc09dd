"""Frame timing from a monotonic clock."""

from __future__ import annotations

import time
from typing import Callable

from samurai_engine.singleton import Singleton


class TimeManager(Singleton):
    """Tracks the time between frames and since initialisation, in seconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._init_time: float | None = None
        self._prev_time: float | None = None
        self._current_time: float | None = None
        self._delta_time = 0.0

    def init(self) -> None:
        """Start measuring from now."""
        now = self._clock()
        self._init_time = now
        self._prev_time = now
        self._current_time = now
        self._delta_time = 0.0

    def update(self) -> None:
        """Sample the clock and compute the time since the previous sample."""
        if self._prev_time is None:
            raise RuntimeError("TimeManager.init() must be called before update()")
        now = self._clock()
        self._current_time = now
        self._delta_time = now - self._prev_time
        self._prev_time = now

    def release(self) -> None:
        """Forget all timing state."""
        self._init_time = None
        self._prev_time = None
        self._current_time = None
        self._delta_time = 0.0

    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._delta_time

    def total_time(self) -> float:
        """Seconds from init to the last update."""
        if self._init_time is None or self._current_time is None:
            raise RuntimeError("TimeManager.init() must be called first")
        return self._current_time - self._init_time