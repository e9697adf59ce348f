"""Shared fixtures for calendarview tests."""

import logging
import os
from datetime import date, datetime

import pytest

from calendarview.config.settings import reset_settings
from calendarview.grid.models import Item


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep settings, env vars and the package logger from leaking between tests."""
    for key in list(os.environ):
        if key.upper().startswith("CALENDARVIEW_"):
            monkeypatch.delenv(key, raising=False)
    # no stray config/config.yaml or .env from the working directory
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    reset_settings()

    yield

    reset_settings()
    package_logger = logging.getLogger("calendarview")
    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixed_now() -> datetime:
    """Evaluation moment used across grid tests: Saturday 2024-06-15 noon."""
    return datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def sample_items() -> list[Item]:
    """Items spread around June 2024, including undated and unparseable ones."""
    return [
        Item(id="a", name="Write report", due_date=datetime(2024, 6, 10, 9, 0)),
        Item(id="b", name="Ship release", due_date="2024-06-10T17:30:00", is_due_completed=True),
        Item(id="c", name="Plan sprint", due_date=date(2024, 6, 20)),
        Item(id="d", name="Someday", due_date=None),
        Item(id="e", name="Garbage date", due_date="not a date"),
        Item(id="f", name="Next quarter", due_date="2024-09-01"),
        Item(id="g", name="Lunch", due_date=datetime(2024, 6, 15, 13, 0)),
    ]
