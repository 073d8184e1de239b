"""Timer package."""

from .countdown import CountdownTimer, CountdownState
from .stopwatch import Stopwatch, StopwatchState

__all__ = [
    "CountdownTimer",
    "CountdownState",
    "Stopwatch",
    "StopwatchState",
]
