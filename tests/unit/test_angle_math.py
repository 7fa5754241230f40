# File: tests/unit/test_angle_math.py
"""
Unit tests for dial geometry helpers.
"""

import pytest

from src.utils.angle_math import (
    polar_to_cartesian, cartesian_to_polar, minutes_to_angle, angle_to_minutes,
    hand_angles, describe_arc, describe_donut_slice, track_radius
)


class TestPolarConversion:
    """Tests for polar <-> cartesian conversion."""

    def test_zero_degrees_is_twelve_oclock(self):
        """Test that 0 degrees points straight up."""
        x, y = polar_to_cartesian(200, 200, 100, 0)
        assert x == pytest.approx(200)
        assert y == pytest.approx(100)

    def test_angles_increase_clockwise(self):
        """Test 90 degrees is three o'clock and 180 is six o'clock."""
        assert polar_to_cartesian(200, 200, 100, 90) == pytest.approx((300, 200))
        assert polar_to_cartesian(200, 200, 100, 180) == pytest.approx((200, 300))
        assert polar_to_cartesian(200, 200, 100, 270) == pytest.approx((100, 200))

    @pytest.mark.parametrize("angle", [0, 7.5, 88, 135, 270, 359.5])
    def test_cartesian_to_polar_inverts(self, angle):
        """Test the inverse recovers distance and angle."""
        x, y = polar_to_cartesian(200, 200, 85, angle)
        distance, recovered = cartesian_to_polar(x, y, 200, 200)

        assert distance == pytest.approx(85)
        assert recovered == pytest.approx(angle, abs=1e-9)

    def test_polar_angle_is_in_range(self):
        """Test a point just left of twelve is near 360, not negative."""
        _, angle = cartesian_to_polar(199.9, 100, 200, 200)
        assert 359 < angle < 360


class TestMinuteAngles:
    """Tests for minute <-> angle mapping."""

    def test_minutes_to_angle(self):
        """Test half a degree per minute."""
        assert minutes_to_angle(0) == 0.0
        assert minutes_to_angle(90) == 45.0
        assert minutes_to_angle(720) == 360.0

    def test_angle_to_minutes(self):
        assert angle_to_minutes(45.0) == 90.0

    def test_hand_angles(self):
        """Test clock hand angles for 3:30:15."""
        hour, minute, second = hand_angles(15, 30, 15)

        assert hour == 105.0
        assert minute == pytest.approx(181.5)
        assert second == 90

    def test_track_radius(self):
        """Test each track pushes the arc outward by the step."""
        assert track_radius(85, 0) == 85
        assert track_radius(85, 2) == pytest.approx(109)
        assert track_radius(145, 1, step=10) == 155


class TestPathDescription:
    """Tests for SVG path builders."""

    def test_small_arc_flag(self):
        """Test an arc under 180 degrees uses the small-arc flag."""
        path = describe_arc(200, 200, 100, 0, 90)
        parts = path.split()

        assert parts[0] == "M"
        assert parts[1:3] == ["300", "200"]  # starts at the end angle
        assert parts[3] == "A"
        assert parts[7] == "0"
        assert parts[-2:] == ["200", "100"]

    def test_large_arc_flag(self):
        """Test an arc over 180 degrees uses the large-arc flag."""
        parts = describe_arc(200, 200, 100, 0, 270).split()
        assert parts[7] == "1"

    def test_donut_slice_is_closed(self):
        """Test the slice returns to its start and closes."""
        path = describe_donut_slice(200, 200, 40, 110, 0, 30)

        assert path.startswith("M")
        assert path.endswith("Z")
        assert path.count("A") == 2
        assert " L " in path

    def test_full_turn_is_two_half_arcs(self):
        """Test a 360 degree arc is split so its start and end points differ."""
        path = describe_arc(200, 200, 100, 0, 360)

        assert path == "M 200 100 A 100 100 0 0 0 200 300 A 100 100 0 0 0 200 100"
