"""Shared pytest fixtures for Tickwatch tests."""

import os
import sys
from datetime import timedelta

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from tickwatch.timer import CountdownTimer, Stopwatch

from helpers import ManualClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def countdown(qapp):
    """Fresh CountdownTimer with the default 1 s tick."""
    timer = CountdownTimer()
    yield timer
    timer.stop()


@pytest.fixture
def stopwatch(qapp, clock):
    """Fresh Stopwatch driven by a manual clock."""
    watch = Stopwatch(tick_interval=timedelta(milliseconds=100), clock=clock)
    yield watch
    watch.stop()
