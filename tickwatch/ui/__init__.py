"""UI package."""

from .main_window import TimerWindow
from .styles import build_stylesheet, DEFAULT_PALETTE

__all__ = [
    "TimerWindow",
    "build_stylesheet",
    "DEFAULT_PALETTE",
]
