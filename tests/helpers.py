"""Shared test helpers for Tickwatch."""

from datetime import timedelta

from tickwatch.clock import Clock
from tickwatch.timer import CountdownTimer


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ManualClock(Clock):
    """Monotonic clock that only moves when ``advance()`` is called."""

    def __init__(self, start_ns: int = 1_000_000_000):
        self._now_ns = start_ns

    def read_ns(self) -> int:
        return self._now_ns

    def advance(self, delta: timedelta) -> None:
        self._now_ns += delta // timedelta(microseconds=1) * 1000


def secs(value: float) -> timedelta:
    return timedelta(seconds=value)


def ms(value: int) -> timedelta:
    return timedelta(milliseconds=value)


def tick(timer, times: int = 1) -> None:
    """Fire the timer's tick slot directly, as QTimer would."""
    for _ in range(times):
        timer._on_tick()


def run_to_end(timer: CountdownTimer, limit: int = 10_000) -> int:
    """Tick until the countdown stops running; returns the tick count."""
    count = 0
    while timer.is_running and count < limit:
        timer._on_tick()
        count += 1
    return count
