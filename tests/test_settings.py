"""Tests for Settings defaults and JSON persistence."""

import json
import logging
from datetime import timedelta

import pytest

from tickwatch.settings import Settings, load_settings, save_settings


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr("tickwatch.settings.SETTINGS_PATH", path)
    monkeypatch.setattr("tickwatch.settings.APP_SUPPORT_DIR", tmp_path)
    return path


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.countdown_seconds == 60
        assert s.countdown_tick == timedelta(seconds=1)
        assert s.stopwatch_tick == timedelta(milliseconds=100)
        assert s.countdown_duration == timedelta(seconds=60)
        assert s.always_on_top is False

    def test_durations_are_never_zero(self):
        s = Settings(countdown_seconds=0, countdown_tick_ms=0, stopwatch_tick_ms=-5)
        assert s.countdown_duration > timedelta(0)
        assert s.countdown_tick > timedelta(0)
        assert s.stopwatch_tick > timedelta(0)

    def test_round_trip(self, settings_path):
        save_settings(Settings(countdown_seconds=300, stopwatch_tick_ms=50,
                               always_on_top=True))
        loaded = load_settings()
        assert loaded.countdown_seconds == 300
        assert loaded.stopwatch_tick_ms == 50
        assert loaded.always_on_top is True

    def test_missing_file_gives_defaults(self, settings_path):
        assert load_settings() == Settings()

    def test_unknown_keys_are_ignored(self, settings_path):
        settings_path.write_text(json.dumps({"countdown_seconds": 42, "theme": "x"}))
        assert load_settings().countdown_seconds == 42

    def test_corrupt_file_gives_defaults(self, settings_path, caplog):
        settings_path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="tickwatch.settings"):
            assert load_settings() == Settings()
        assert "unreadable settings" in caplog.text
