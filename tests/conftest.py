"""Shared pytest fixtures for ArcTimer tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from arctimer.timer.engine import TimerEngine

from helpers import FakeTimer, RecordingSurface


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with a 10 minute duration."""
    return TimerEngine(parent=None, initial_time=600)


@pytest.fixture
def fake_timer(qapp):
    """Signal-driven stand-in that records every mutation call."""
    return FakeTimer(initial_time=600)


@pytest.fixture
def surface():
    return RecordingSurface()
