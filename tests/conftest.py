"""Shared pytest fixtures for RingTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from ringtimer.timer.engine import TimerEngine

from helpers import ManualScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr("ringtimer.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("ringtimer.settings.APP_SUPPORT_DIR", tmp_path)
    yield


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(qapp, scheduler):
    """Fresh 5-minute TimerEngine driven by simulated time."""
    return TimerEngine(parent=None, scheduler=scheduler)


@pytest.fixture
def short_engine(qapp, scheduler):
    """TimerEngine with a 3-second countdown."""
    return TimerEngine(parent=None, total_seconds=3, scheduler=scheduler)
