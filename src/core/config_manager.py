# File: src/core/config_manager.py
"""
Centralized configuration management for Radial Day.
Loads settings from environment variables and holds the dial geometry.
"""

import os
from pathlib import Path
from typing import Dict, Any

import pytz
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"Configuration Warning: {name}={raw!r} is not a number, using {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ['yes', 'true', '1', 'on', 'y', 't']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from src/core/

    # Subdirectories
    DATA_DIR = BASE_DIR / "data"
    LOGS_DIR = Path(os.getenv("RADIAL_DAY_LOGS_DIR", str(BASE_DIR / "logs")))

    # Files
    EVENTS_FILE = Path(os.getenv("RADIAL_DAY_EVENTS_FILE", str(DATA_DIR / "events.json")))

    # Logging
    LOG_LEVEL = os.getenv("RADIAL_DAY_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_bool("RADIAL_DAY_LOG_TO_FILE", True)

    # Application Settings
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "UTC")
    SLEEP_START = os.getenv("SLEEP_START", "23:00")
    SLEEP_END = os.getenv("SLEEP_END", "07:00")
    DAILY_CAPACITY_HOURS = _env_float("DAILY_CAPACITY_HOURS", 8.0)

    # Dial geometry (SVG user units, viewBox 0 0 400 400)
    DIAL_SIZE = 400
    DIAL_CENTER = DIAL_SIZE / 2

    # Inner ring (AM)
    AM_BASE_RADIUS = 85
    AM_CLICK_INNER = 40
    AM_CLICK_OUTER = 110

    # Outer ring (PM), pushed outside the hour numbers
    PM_BASE_RADIUS = 145
    PM_CLICK_INNER = 130
    PM_CLICK_OUTER = 190

    # Each extra track pushes an arc outward by this much
    TRACK_STEP = 12

    # Pointer interaction
    SNAP_DEGREES = 7.5           # 15 minutes
    CLICK_EPSILON_DEGREES = 2.0

    @classmethod
    def ring_boundary_radius(cls) -> float:
        """Radius separating AM from PM pointer hits."""
        return (cls.AM_BASE_RADIUS + cls.PM_BASE_RADIUS) / 2

    @classmethod
    def load_user_settings(cls) -> Dict[str, Any]:
        """Sleep window and capacity, in the shape the UI stores them."""
        return {
            'dailyCapacityHours': cls.DAILY_CAPACITY_HOURS,
            'sleepStart': cls.SLEEP_START,
            'sleepEnd': cls.SLEEP_END,
        }

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if not cls.AM_BASE_RADIUS < cls.PM_BASE_RADIUS:
            errors.append("AM_BASE_RADIUS must be smaller than PM_BASE_RADIUS")

        if cls.TRACK_STEP <= 0:
            errors.append("TRACK_STEP must be positive")

        if not (cls.AM_CLICK_INNER < cls.AM_CLICK_OUTER
                <= cls.PM_CLICK_INNER < cls.PM_CLICK_OUTER):
            errors.append("Click zones must be ordered AM inner < AM outer <= PM inner < PM outer")

        if not 0 < cls.SNAP_DEGREES <= 30:
            errors.append("SNAP_DEGREES must be within (0, 30]")

        if cls.DAILY_CAPACITY_HOURS <= 0 or cls.DAILY_CAPACITY_HOURS > 24:
            errors.append("DAILY_CAPACITY_HOURS must be within (0, 24]")

        try:
            pytz.timezone(cls.TARGET_TIMEZONE)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Unknown TIMEZONE '{cls.TARGET_TIMEZONE}'")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
