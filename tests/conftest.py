# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and dial helpers for all tests.
"""

import os
import sys
from datetime import date
from pathlib import Path

import pytest

# Keep test runs from writing log files
os.environ.setdefault("RADIAL_DAY_LOG_TO_FILE", "0")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.config_manager import Config
from src.models import Event, Recurrence, Ring
from src.utils.angle_math import polar_to_cartesian


# ==================== Date Fixtures ====================

@pytest.fixture
def new_year():
    """Monday 2024-01-01."""
    return date(2024, 1, 1)


@pytest.fixture
def next_day():
    return date(2024, 1, 2)


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event():
    """Factory fixture for creating test events."""
    def _create(
        start: str = "09:00",
        end: str = "10:00",
        on: str = "2024-01-01",
        recurrence: Recurrence = Recurrence.NONE,
        event_id: str = None,
        title: str = "Test Event",
        **extra
    ) -> Event:
        """Create a test event with given parameters."""
        return Event(
            id=event_id or f"evt_{start.replace(':', '')}_{end.replace(':', '')}",
            title=title,
            date=on,
            start=start,
            end=end,
            recurrence=recurrence,
            **extra
        )

    return _create


@pytest.fixture
def evening_event(make_event):
    """One-off 22:00-23:00 event on 2024-01-01."""
    return make_event("22:00", "23:00", event_id="evening", title="Evening Call")


@pytest.fixture
def overnight_event(make_event):
    """One-off event crossing midnight from 2024-01-01 into 2024-01-02."""
    return make_event("23:00", "01:00", event_id="overnight", title="Night Shift")


@pytest.fixture
def weekly_event(make_event):
    """Monday morning stand-up, weekly from 2024-01-01."""
    return make_event("08:00", "09:00", recurrence=Recurrence.WEEKLY,
                      event_id="standup", title="Stand-up")


@pytest.fixture
def sample_catalog(evening_event, overnight_event, weekly_event, make_event):
    """Mixed catalog of one-off and recurring events."""
    return [
        evening_event,
        overnight_event,
        weekly_event,
        make_event("12:30", "13:30", recurrence=Recurrence.DAILY,
                   event_id="lunch", title="Lunch"),
    ]


# ==================== Dial Fixtures ====================

@pytest.fixture
def dial_point():
    """Pointer coordinates for an angle on a ring's base radius."""
    def _point(angle: float, ring: Ring = Ring.AM):
        radius = Config.AM_BASE_RADIUS if ring == Ring.AM else Config.PM_BASE_RADIUS
        return polar_to_cartesian(Config.DIAL_CENTER, Config.DIAL_CENTER, radius, angle)

    return _point


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
