# File: src/utils/angle_math.py
"""
Dial geometry helpers.

Angles are in degrees with 0 at the 12 o'clock position, increasing
clockwise. One ring covers 12 hours, so one minute is half a degree.
"""

import math
from typing import Tuple

from src.core.config_manager import Config

RING_MINUTES = 720
FULL_TURN = 360.0


def polar_to_cartesian(center_x: float, center_y: float, radius: float,
                       angle_deg: float) -> Tuple[float, float]:
    """Point at `radius` from the center along a dial angle."""
    angle_rad = math.radians(angle_deg - 90)
    return (
        center_x + radius * math.cos(angle_rad),
        center_y + radius * math.sin(angle_rad),
    )


def cartesian_to_polar(x: float, y: float, center_x: float,
                       center_y: float) -> Tuple[float, float]:
    """Inverse of polar_to_cartesian: (distance, angle in [0, 360))."""
    dx = x - center_x
    dy = y - center_y
    distance = math.hypot(dx, dy)
    angle = (math.degrees(math.atan2(dy, dx)) + 90) % FULL_TURN
    return distance, angle


def minutes_to_angle(minutes: float) -> float:
    """Map 0-720 minutes within a ring to 0-360 degrees."""
    return minutes * FULL_TURN / RING_MINUTES


def angle_to_minutes(angle_deg: float) -> float:
    return angle_deg * RING_MINUTES / FULL_TURN


def track_radius(base_radius: float, track: int, step: float = Config.TRACK_STEP) -> float:
    """Radius of an arc drawn on `track`, pushed outward from the ring's base."""
    return base_radius + track * step


def hand_angles(hour: int, minute: int, second: int = 0) -> Tuple[float, float, float]:
    """Hour, minute and second hand angles on the 12-hour face."""
    hour_angle = (hour % 12) * 30 + minute * 0.5
    minute_angle = minute * 6 + second * 0.1
    second_angle = second * 6
    return hour_angle, minute_angle, second_angle


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip('0').rstrip('.')
    return '0' if text in ('', '-0') else text


def _large_arc_flag(start_angle: float, end_angle: float) -> str:
    sweep = end_angle - start_angle
    if sweep < 0:
        sweep += FULL_TURN
    return "0" if sweep <= 180 else "1"


def describe_arc(x: float, y: float, radius: float,
                 start_angle: float, end_angle: float) -> str:
    """
    SVG path for an arc of a circle, drawn from end_angle back to start_angle.

    A full turn is written as two half arcs, since an SVG arc whose end point
    equals its start point draws nothing.
    """
    if end_angle - start_angle >= FULL_TURN:
        top = polar_to_cartesian(x, y, radius, start_angle)
        bottom = polar_to_cartesian(x, y, radius, start_angle + FULL_TURN / 2)
        return " ".join([
            "M", _fmt(top[0]), _fmt(top[1]),
            "A", _fmt(radius), _fmt(radius), "0", "0", "0", _fmt(bottom[0]), _fmt(bottom[1]),
            "A", _fmt(radius), _fmt(radius), "0", "0", "0", _fmt(top[0]), _fmt(top[1]),
        ])

    start = polar_to_cartesian(x, y, radius, end_angle)
    end = polar_to_cartesian(x, y, radius, start_angle)
    return " ".join([
        "M", _fmt(start[0]), _fmt(start[1]),
        "A", _fmt(radius), _fmt(radius), "0", _large_arc_flag(start_angle, end_angle), "0",
        _fmt(end[0]), _fmt(end[1]),
    ])


def describe_donut_slice(x: float, y: float, inner_radius: float, outer_radius: float,
                         start_angle: float, end_angle: float) -> str:
    """SVG path for a closed ring slice between two radii."""
    start_outer = polar_to_cartesian(x, y, outer_radius, end_angle)
    end_outer = polar_to_cartesian(x, y, outer_radius, start_angle)
    start_inner = polar_to_cartesian(x, y, inner_radius, end_angle)
    end_inner = polar_to_cartesian(x, y, inner_radius, start_angle)
    flag = _large_arc_flag(start_angle, end_angle)

    return " ".join([
        "M", _fmt(start_outer[0]), _fmt(start_outer[1]),
        "A", _fmt(outer_radius), _fmt(outer_radius), "0", flag, "0",
        _fmt(end_outer[0]), _fmt(end_outer[1]),
        "L", _fmt(end_inner[0]), _fmt(end_inner[1]),
        # inner arc runs the other way
        "A", _fmt(inner_radius), _fmt(inner_radius), "0", flag, "1",
        _fmt(start_inner[0]), _fmt(start_inner[1]),
        "Z",
    ])
