# File: tests/unit/test_models.py
"""
Unit tests for data models.
Tests the dataclasses and parsing helpers.
"""

import pytest
from datetime import date, datetime

from src.models import (
    Event, event_from_dict, Recurrence, Ring, Emphasis, Segment, RingSpan,
    ClickSelection, RangeSelection, DragState, GesturePhase,
    parse_time_of_day, time_to_minutes, minutes_to_time, format_time_12, parse_date
)


# ==================== Time Helper Tests ====================

class TestTimeHelpers:
    """Tests for time-of-day parsing and formatting."""

    def test_parse_valid_time(self):
        """Test a well-formed time."""
        assert parse_time_of_day("09:45") == (9, 45)

    def test_parse_malformed_components_become_zero(self):
        """Test that unparseable parts are read as zero."""
        assert parse_time_of_day("xx:30") == (0, 30)
        assert parse_time_of_day("14:??") == (14, 0)
        assert parse_time_of_day("") == (0, 0)
        assert parse_time_of_day(None) == (0, 0)

    def test_time_to_minutes(self):
        """Test minute-of-day conversion, including 24:00."""
        assert time_to_minutes("00:00") == 0
        assert time_to_minutes("13:15") == 795
        assert time_to_minutes("24:00") == 1440

    def test_minutes_to_time(self):
        """Test formatting back to HH:MM."""
        assert minutes_to_time(0) == "00:00"
        assert minutes_to_time(795) == "13:15"
        assert minutes_to_time(1440) == "24:00"

    def test_format_time_12(self):
        """Test 12-hour rendering."""
        assert format_time_12("00:05") == "12:05 AM"
        assert format_time_12("12:00") == "12:00 PM"
        assert format_time_12("21:30") == "9:30 PM"
        assert format_time_12("") == ""

    def test_parse_date_variants(self):
        """Test date parsing from strings and datetimes."""
        assert parse_date("2024-01-01") == date(2024, 1, 1)
        assert parse_date("2024-01-01T10:00:00Z") == date(2024, 1, 1)
        assert parse_date(datetime(2024, 1, 1, 8)) == date(2024, 1, 1)

    def test_parse_date_invalid_raises(self):
        """Test that an unreadable date raises ValueError."""
        with pytest.raises(ValueError, match="Invalid calendar date"):
            parse_date("next tuesday")


# ==================== Event Tests ====================

class TestEvent:
    """Tests for Event dataclass."""

    def test_event_creation_converts_types(self):
        """Test string date and recurrence are converted."""
        event = Event("1", "Gym", "2024-01-01", "07:00", "08:00", "weekly")

        assert event.date == date(2024, 1, 1)
        assert event.recurrence == Recurrence.WEEKLY
        assert event.is_recurring is True

    def test_unknown_recurrence_falls_back_to_none(self):
        """Test invalid recurrence strings."""
        event = Event("1", "Gym", "2024-01-01", "07:00", "08:00", "yearly")
        assert event.recurrence == Recurrence.NONE

    @pytest.mark.parametrize("raw", [True, 5, 1.5, ["daily"], {"every": "day"}])
    def test_non_string_recurrence_falls_back_to_none(self, raw):
        """Test non-string recurrence values are read as non-recurring."""
        event = event_from_dict({
            'id': '1', 'title': 'x', 'date': '2024-01-01',
            'start': '09:00', 'end': '10:00', 'recurrence': raw,
        })

        assert event.recurrence == Recurrence.NONE
        assert event.to_dict()['recurrence'] == 'none'

    def test_crosses_midnight(self):
        """Test rollover detection."""
        assert Event("1", "a", "2024-01-01", "23:00", "01:00").crosses_midnight() is True
        assert Event("2", "b", "2024-01-01", "09:00", "10:00").crosses_midnight() is False

    def test_equal_start_and_end_is_full_day(self):
        """Test that start == end counts as a 24 hour event."""
        event = Event("1", "All day", "2024-01-01", "06:00", "06:00")
        assert event.crosses_midnight() is True
        assert event.duration_minutes() == 1440

    def test_base_interval_rolls_over(self):
        """Test that end moves to the next day when it precedes start."""
        event = Event("1", "Night", "2024-01-01", "23:00", "01:00")
        start, end = event.base_interval()

        assert start == datetime(2024, 1, 1, 23, 0)
        assert end == datetime(2024, 1, 2, 1, 0)
        assert event.duration_minutes() == 120

    def test_anchored_to_other_day(self):
        """Test re-anchoring keeps times and applies rollover."""
        event = Event("1", "Night", "2024-01-01", "23:00", "01:00", "daily")
        start, end = event.anchored_to(date(2024, 3, 5))

        assert start == datetime(2024, 3, 5, 23, 0)
        assert end == datetime(2024, 3, 6, 1, 0)

    def test_to_dict_and_from_dict(self):
        """Test conversion to and from the catalog shape."""
        data = {
            'id': '42',
            'title': 'Review',
            'date': '2024-02-29',
            'start': '16:00',
            'end': '17:30',
            'recurrence': 'monthly',
            'color': '#3b82f6',
            'category': 'Work / Focus',
            'completed': 'true',
        }

        event = event_from_dict(data)

        assert event.recurrence == Recurrence.MONTHLY
        assert event.completed is True
        assert event.to_dict()['date'] == '2024-02-29'
        assert event.to_dict()['recurrence'] == 'monthly'

    def test_from_dict_without_date_raises(self):
        """Test that a record without an anchor date is rejected."""
        with pytest.raises(ValueError):
            event_from_dict({'id': '1', 'title': 'x', 'start': '09:00', 'end': '10:00'})


# ==================== Layout Model Tests ====================

class TestLayoutModels:
    """Tests for segments, spans and selections."""

    def test_ring_span_angles(self):
        """Test ring-relative minutes convert to degrees."""
        span = RingSpan(Ring.PM, 600, 660)
        assert span.start_angle == 300.0
        assert span.end_angle == 330.0

    def test_ring_for_minute(self):
        """Test ring lookup by minute of day."""
        assert Ring.for_minute(0) == Ring.AM
        assert Ring.for_minute(719) == Ring.AM
        assert Ring.for_minute(720) == Ring.PM
        assert Ring.PM.offset_minutes == 720

    def test_segment_opacity(self):
        """Test emphasis and completion drive opacity."""
        base = Segment("1", Ring.AM, 0.0, 30.0)

        assert base.opacity == 0.9
        assert Segment("1", Ring.AM, 0.0, 30.0, emphasis=Emphasis.FOCUSED).opacity == 1.0
        assert Segment("1", Ring.AM, 0.0, 30.0, emphasis=Emphasis.DIMMED).opacity == 0.1
        assert Segment("1", Ring.AM, 0.0, 30.0, completed=True).opacity == pytest.approx(0.54)

    def test_click_selection_interval(self):
        """Test tapped hour becomes a one hour interval."""
        assert ClickSelection(9).to_interval() == ("09:00", "10:00")
        assert ClickSelection(23).to_interval() == ("23:00", "00:00")

    def test_range_selection_interval(self):
        assert RangeSelection("10:15", "11:45").to_interval() == ("10:15", "11:45")

    def test_drag_state_defaults(self):
        """Test a fresh drag state is idle and unlocked."""
        state = DragState()
        assert state.phase == GesturePhase.IDLE
        assert state.is_dragging is False
        assert state.locked is False
