"""Presentation layer between the timer engines and the window.

The engines publish raw ``timedelta`` values; this module turns them into
display strings and forwards button presses.  Widgets only talk to
``TimerViewModel``.
"""

from __future__ import annotations

from datetime import timedelta

from PyQt6.QtCore import QObject

from .settings import Settings
from .state import StateValue
from .timer import CountdownTimer, Stopwatch

_SECOND = timedelta(seconds=1)
_MILLISECOND = timedelta(milliseconds=1)


def format_duration(duration: timedelta, include_milliseconds: bool = False) -> str:
    """``MM:SS`` or ``MM:SS.mmm``.  Minutes keep counting past 59."""
    duration = max(timedelta(0), duration)
    total_seconds = duration // _SECOND
    minutes, seconds = divmod(total_seconds, 60)
    if include_milliseconds:
        millis = (duration - total_seconds * _SECOND) // _MILLISECOND
        return f"{minutes:02d}:{seconds:02d}.{millis:03d}"
    return f"{minutes:02d}:{seconds:02d}"


def _format_list(durations: tuple[timedelta, ...]) -> tuple[str, ...]:
    return tuple(format_duration(d, include_milliseconds=True) for d in durations)


class TimerViewModel(QObject):
    """Owns one countdown and one stopwatch for the lifetime of a window."""

    def __init__(
        self,
        settings: Settings | None = None,
        parent: QObject | None = None,
        *,
        countdown: CountdownTimer | None = None,
        stopwatch: Stopwatch | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else Settings()

        # ── countdown ─────────────────────────────────────────────────
        if countdown is None:
            countdown = CountdownTimer(
                self, tick_interval=self._settings.countdown_tick,
            )
        else:
            countdown.setParent(self)
        self._countdown = countdown
        self.countdown_text: StateValue = self._countdown.remaining_time.map(
            format_duration, self,
        )
        self.is_countdown_running: StateValue = self._countdown.running

        # ── stopwatch ─────────────────────────────────────────────────
        if stopwatch is None:
            stopwatch = Stopwatch(
                self, tick_interval=self._settings.stopwatch_tick,
            )
        else:
            stopwatch.setParent(self)
        self._stopwatch = stopwatch
        self.stopwatch_text: StateValue = self._stopwatch.elapsed_time.map(
            lambda d: format_duration(d, include_milliseconds=True), self,
        )
        self.is_stopwatch_running: StateValue = self._stopwatch.running
        self.lap_times: StateValue = self._stopwatch.lap_times
        self.split_times: StateValue = self._stopwatch.split_times
        self.lap_texts: StateValue = self.lap_times.map(_format_list, self)
        self.split_texts: StateValue = self.split_times.map(_format_list, self)

    @property
    def countdown(self) -> CountdownTimer:
        return self._countdown

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch

    @property
    def settings(self) -> Settings:
        return self._settings

    # ── countdown ─────────────────────────────────────────────────────────

    def start_countdown(self, duration: timedelta | None = None) -> None:
        """Start a countdown; defaults to the configured length."""
        if duration is None:
            duration = self._settings.countdown_duration
        self._countdown.start(duration)

    def pause_countdown(self) -> None:
        self._countdown.pause()

    def resume_countdown(self) -> None:
        self._countdown.resume()

    def stop_countdown(self) -> None:
        self._countdown.stop()

    def restart_countdown(self) -> None:
        self._countdown.restart()

    # ── stopwatch ─────────────────────────────────────────────────────────

    def start_stopwatch(self) -> None:
        self._stopwatch.start()

    def pause_stopwatch(self) -> None:
        self._stopwatch.pause()

    def stop_stopwatch(self) -> None:
        self._stopwatch.stop()

    def lap_stopwatch(self) -> None:
        self._stopwatch.lap()

    def record_split_time(self) -> None:
        self._stopwatch.split()

    def reset_stopwatch(self) -> None:
        self._stopwatch.reset()

    # ── lifecycle ─────────────────────────────────────────────────────────

    def close(self) -> None:
        """End of the owning scope: cancel both engines' ticks."""
        self._countdown.stop()
        self._stopwatch.stop()
