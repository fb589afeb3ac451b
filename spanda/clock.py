"""Time sources that decouple animation from wall time."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

__all__ = ["Clock", "WallClock", "ManualClock", "MockClock"]


class Clock(ABC):
    """Provides the seconds elapsed for each animation frame."""

    @abstractmethod
    def delta(self) -> float:
        """Seconds elapsed since the previous call."""


class WallClock(Clock):
    """Real elapsed time measured with a monotonic counter."""

    def __init__(self) -> None:
        self._last = time.perf_counter()

    def __repr__(self) -> str:
        return f"WallClock(last={self._last!r})"

    def delta(self) -> float:
        now = time.perf_counter()
        dt = now - self._last
        self._last = now
        return dt


class ManualClock(Clock):
    """A clock fed explicitly with :meth:`advance`.

    :meth:`delta` returns the accumulated time and resets the accumulator.
    """

    def __init__(self) -> None:
        self._pending = 0.0

    def __repr__(self) -> str:
        return f"ManualClock(pending={self._pending!r})"

    def advance(self, dt: float) -> None:
        """Accumulate ``dt`` seconds for the next :meth:`delta` call."""
        self._pending += dt

    def delta(self) -> float:
        dt = self._pending
        self._pending = 0.0
        return dt


class MockClock(Clock):
    """A clock that returns the same fixed step on every call."""

    def __init__(self, step_seconds: float) -> None:
        self._step = float(step_seconds)

    def __repr__(self) -> str:
        return f"MockClock(step={self._step!r})"

    def delta(self) -> float:
        return self._step