# src/minigun/clock.py
from __future__ import annotations
import time
from typing import Callable

from .config import MAX_DT, MIN_DT


def clamp_dt(raw_dt: float, max_dt: float = MAX_DT, min_dt: float = MIN_DT) -> float:
    """Bound a raw frame delta to (0, max_dt] so one stall can't blow up physics."""
    if raw_dt > max_dt:
        return max_dt
    if raw_dt < min_dt:
        return min_dt
    return raw_dt


class FrameClock:
    """
    Samples a monotonic time source once per frame and hands out clamped dt.

    time_fn defaults to time.perf_counter; tests pass a fake one.
    """

    def __init__(self, time_fn: Callable[[], float] = time.perf_counter, max_dt: float = MAX_DT):
        self._time_fn = time_fn
        self.max_dt = float(max_dt)
        self._last = self._time_fn()

    def tick(self) -> float:
        now = self._time_fn()
        raw = now - self._last
        self._last = now
        return clamp_dt(raw, self.max_dt)

    def restart(self) -> None:
        """Forget the previous sample (used after a reset so the pause isn't counted)."""
        self._last = self._time_fn()
