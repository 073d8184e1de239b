"""Stopwatch with lap deltas and cumulative splits.

Elapsed time is re-derived from a monotonic ``TimeMark`` on every tick
rather than accumulated tick by tick, so late timeouts never compound into
drift.  Pausing folds the open segment into an accumulator; resuming takes
a fresh mark.

Laps and splits
---------------
- ``lap()`` records the time since the previous lap (a delta).
- ``split()`` records the total elapsed time (cumulative).
"""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum

from PyQt6.QtCore import QObject, QTimer

from ..clock import Clock, MonotonicClock, TimeMark
from ..state import StateValue
from .countdown import ZERO, interval_ms

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = timedelta(milliseconds=100)


class StopwatchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class Stopwatch(QObject):
    """Counts up from zero on a periodic ``QTimer``."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        tick_interval: timedelta = DEFAULT_TICK_INTERVAL,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(parent)
        if tick_interval <= ZERO:
            raise ValueError("Tick interval must be positive")
        self._tick_interval = tick_interval
        self._clock: Clock = clock if clock is not None else MonotonicClock()

        self.elapsed_time = StateValue(ZERO, self)
        self.running = StateValue(False, self)
        self.lap_times = StateValue((), self)
        self.split_times = StateValue((), self)

        # ── run segment ───────────────────────────────────────────────
        self._start_mark: TimeMark | None = None
        self._accumulated: timedelta = ZERO

        # ── lap segment ───────────────────────────────────────────────
        self._lap_mark: TimeMark | None = None
        self._accumulated_lap: timedelta = ZERO

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms(tick_interval))
        self._qt_timer.timeout.connect(self._on_tick)

    # ── properties ────────────────────────────────────────────────────────

    @property
    def elapsed(self) -> timedelta:
        return self.elapsed_time.value

    @property
    def is_running(self) -> bool:
        return self.running.value

    @property
    def laps(self) -> tuple[timedelta, ...]:
        return self.lap_times.value

    @property
    def splits(self) -> tuple[timedelta, ...]:
        return self.split_times.value

    @property
    def tick_interval(self) -> timedelta:
        return self._tick_interval

    @property
    def state(self) -> StopwatchState:
        if self.is_running:
            return StopwatchState.RUNNING
        if self._start_mark is not None:
            return StopwatchState.PAUSED
        return StopwatchState.IDLE

    # ── controls ──────────────────────────────────────────────────────────

    def start(self) -> None:
        """Start, or resume after ``pause()``."""
        if self.is_running:
            return
        self.running.set(True)

        now = self._clock.mark_now()
        self._start_mark = now
        self._lap_mark = now
        logger.debug("Stopwatch started (accumulated %s)", self._accumulated)

        self._start_ticking()

    def pause(self) -> None:
        if not self.is_running:
            return
        self.running.set(False)

        if self._start_mark is not None:
            self._accumulated += self._start_mark.elapsed_now()
        if self._lap_mark is not None:
            self._accumulated_lap += self._lap_mark.elapsed_now()

        self._qt_timer.stop()
        self.elapsed_time.set(self._accumulated)
        logger.debug("Stopwatch paused at %s", self._accumulated)

    def stop(self) -> None:
        """Stop and clear elapsed time, laps and splits."""
        self._qt_timer.stop()
        self.running.set(False)
        self.elapsed_time.set(ZERO)
        self.lap_times.set(())
        self.split_times.set(())
        self._accumulated = ZERO
        self._accumulated_lap = ZERO
        self._start_mark = None
        self._lap_mark = None

    def lap(self) -> None:
        """Record the time since the previous lap (or since start)."""
        if not self.is_running:
            return

        segment = self._lap_mark.elapsed_now() if self._lap_mark else ZERO
        lap_duration = self._accumulated_lap + segment
        if lap_duration > ZERO:
            self.lap_times.set(self.laps + (lap_duration,))

        self._lap_mark = self._clock.mark_now()
        self._accumulated_lap = ZERO

    def split(self) -> None:
        """Record the total elapsed time right now."""
        if not self.is_running:
            return
        self.split_times.set(self.splits + (self._current_elapsed(),))

    def reset(self) -> None:
        """Zero everything; keeps running if it was running."""
        was_running = self.is_running
        self.stop()
        if was_running:
            self.start()

    # ── internal ──────────────────────────────────────────────────────────

    def _current_elapsed(self) -> timedelta:
        segment = self._start_mark.elapsed_now() if self._start_mark else ZERO
        return self._accumulated + segment

    def _start_ticking(self) -> None:
        self._qt_timer.stop()
        self._on_tick()
        self._qt_timer.start()

    def _on_tick(self) -> None:
        if not self.is_running:
            return
        self.elapsed_time.set(self._current_elapsed())
