"""Countdown timer state machine.

States
------
IDLE       Nothing loaded; remaining is zero, not running.
RUNNING    Counting down.
PAUSED     Frozen with time left on the clock.
FINISHED   Reached zero on its own; ``restart()`` reloads the last duration.

Transitions
-----------
IDLE | PAUSED | FINISHED | RUNNING → RUNNING   (start)
RUNNING → PAUSED                              (pause)
PAUSED → RUNNING                              (resume)
RUNNING → FINISHED                            (tick reaches 0)
Any → IDLE                                    (stop)

Redundant calls (pausing an idle timer, resuming a running one) are
silent no-ops so the UI can fire them freely.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..state import StateValue

logger = logging.getLogger(__name__)

ZERO = timedelta(0)
DEFAULT_TICK_INTERVAL = timedelta(seconds=1)


class CountdownState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


def interval_ms(interval: timedelta) -> int:
    """QTimer interval for *interval*, never below 1 ms."""
    return max(1, round(interval / timedelta(milliseconds=1)))


class CountdownTimer(QObject):
    """Counts a duration down to zero on a periodic ``QTimer``.

    Signals
    -------
    finished()
        Emitted once when the remaining time reaches zero.
    """

    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        tick_interval: timedelta = DEFAULT_TICK_INTERVAL,
    ) -> None:
        super().__init__(parent)
        if tick_interval <= ZERO:
            raise ValueError("Tick interval must be positive")
        self._tick_interval = tick_interval
        self._initial_duration = ZERO

        self.remaining_time = StateValue(ZERO, self)
        self.running = StateValue(False, self)

        # The single tick source; stopped before every restart.
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms(tick_interval))
        self._qt_timer.timeout.connect(self._on_tick)

    # ── properties ────────────────────────────────────────────────────────

    @property
    def remaining(self) -> timedelta:
        return self.remaining_time.value

    @property
    def is_running(self) -> bool:
        return self.running.value

    @property
    def initial_duration(self) -> timedelta:
        """Duration passed to the last ``start()``; zero after ``stop()``."""
        return self._initial_duration

    @property
    def tick_interval(self) -> timedelta:
        return self._tick_interval

    @property
    def state(self) -> CountdownState:
        if self.is_running:
            return CountdownState.RUNNING
        if self.remaining > ZERO:
            return CountdownState.PAUSED
        if self._initial_duration > ZERO:
            return CountdownState.FINISHED
        return CountdownState.IDLE

    # ── controls ──────────────────────────────────────────────────────────

    def start(self, duration: timedelta) -> None:
        """Count down from *duration*, replacing any countdown in progress."""
        if duration <= ZERO:
            raise ValueError("Duration must be positive")
        self._cancel_ticking()
        self._initial_duration = duration
        self.remaining_time.set(duration)
        logger.debug("Countdown started: %s", duration)
        self._start_ticking()

    def pause(self) -> None:
        if not self.is_running:
            return
        self._cancel_ticking()
        self.running.set(False)
        logger.debug("Countdown paused at %s", self.remaining)

    def resume(self) -> None:
        if self.is_running or self.remaining <= ZERO:
            return
        logger.debug("Countdown resumed at %s", self.remaining)
        self._start_ticking()

    def stop(self) -> None:
        """Cancel and clear everything, including the restart duration."""
        self._cancel_ticking()
        self.remaining_time.set(ZERO)
        self.running.set(False)
        self._initial_duration = ZERO

    def restart(self) -> None:
        """Start again from the last duration passed to ``start()``."""
        if self._initial_duration > ZERO:
            self.start(self._initial_duration)
        else:
            logger.warning(
                "Cannot restart: countdown has not been started with a duration yet."
            )

    # ── internal ──────────────────────────────────────────────────────────

    def _start_ticking(self) -> None:
        if self.remaining <= ZERO:
            return
        self.running.set(True)
        self._qt_timer.start()

    def _cancel_ticking(self) -> None:
        self._qt_timer.stop()

    def _on_tick(self) -> None:
        # A timeout already queued when the timer was cancelled lands here.
        if not self.is_running:
            return
        # Clamp: the last tick may overshoot when the interval does not
        # divide the duration evenly.
        remaining = max(ZERO, self.remaining - self._tick_interval)
        self.remaining_time.set(remaining)
        if remaining == ZERO:
            self._cancel_ticking()
            self.running.set(False)
            logger.debug("Countdown finished")
            self.finished.emit()
