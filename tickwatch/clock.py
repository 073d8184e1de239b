"""Monotonic time source used by the stopwatch.

A ``TimeMark`` is an opaque reading taken from a ``Clock``.  The only
question it answers is "how long ago was this?"; it is never turned into
wall-clock time.  Tests swap in a manual clock that only moves when told.
"""

from __future__ import annotations

import time
from datetime import timedelta


class TimeMark:
    """A snapshot of a ``Clock`` reading."""

    __slots__ = ("_clock", "_reading_ns")

    def __init__(self, clock: Clock, reading_ns: int) -> None:
        self._clock = clock
        self._reading_ns = reading_ns

    def elapsed_now(self) -> timedelta:
        return self._clock.elapsed_since(self)

    def __repr__(self) -> str:
        return f"TimeMark({self._reading_ns}ns)"


class Clock:
    """Base class for monotonic time sources.

    Subclasses implement ``read_ns()``; everything else is derived from it.
    """

    def read_ns(self) -> int:
        raise NotImplementedError

    def mark_now(self) -> TimeMark:
        return TimeMark(self, self.read_ns())

    def elapsed_since(self, mark: TimeMark) -> timedelta:
        if mark._clock is not self:
            raise ValueError("TimeMark was taken from a different clock")
        delta_ns = max(0, self.read_ns() - mark._reading_ns)
        return timedelta(microseconds=delta_ns // 1000)


class MonotonicClock(Clock):
    """Reads ``time.monotonic_ns()``."""

    def read_ns(self) -> int:
        return time.monotonic_ns()
