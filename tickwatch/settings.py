"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/Tickwatch/settings.json

Only preferences live here; timer state is never written to disk.

Usage::

    settings = load_settings()
    settings.countdown_seconds = 90
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from datetime import timedelta
from pathlib import Path

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "Tickwatch"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── countdown ─────────────────────────────────────────────────────
    countdown_seconds: int = 60
    countdown_tick_ms: int = 1000

    # ── stopwatch ─────────────────────────────────────────────────────
    stopwatch_tick_ms: int = 100

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 460
    window_height: int = 640
    always_on_top: bool = False

    @property
    def countdown_duration(self) -> timedelta:
        return timedelta(seconds=max(1, self.countdown_seconds))

    @property
    def countdown_tick(self) -> timedelta:
        return timedelta(milliseconds=max(1, self.countdown_tick_ms))

    @property
    def stopwatch_tick(self) -> timedelta:
        return timedelta(milliseconds=max(1, self.stopwatch_tick_ms))


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
