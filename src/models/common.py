# File: src/models/common.py
"""
Parsing and formatting helpers for wall-clock times and calendar dates.
"""

import datetime
from typing import Optional, Tuple, Union

from src.utils.logger import setup_logger

logger = setup_logger(__name__)

MINUTES_PER_DAY = 1440


def _to_int(component: str) -> Tuple[int, bool]:
    try:
        return int(component.strip()), True
    except (ValueError, AttributeError):
        return 0, False


def parse_time_of_day(value: Optional[str]) -> Tuple[int, int]:
    """
    Split an "HH:MM" string into (hour, minute).

    Unparseable components are read as zero instead of raising, so one
    malformed event cannot blank the whole dial.
    """
    if not value or not isinstance(value, str):
        logger.warning(f"Missing or non-string time value {value!r}; using 00:00")
        return 0, 0

    parts = value.split(':')
    hour, hour_ok = _to_int(parts[0])
    minute, minute_ok = _to_int(parts[1]) if len(parts) > 1 else (0, False)

    if not (hour_ok and minute_ok):
        logger.warning(f"Malformed time {value!r}; read as {hour:02d}:{minute:02d}")

    return hour, minute


def time_to_minutes(value: Optional[str]) -> int:
    """Convert "HH:MM" to a minute of day clamped to [0, 1440]."""
    hour, minute = parse_time_of_day(value)
    return max(0, min(MINUTES_PER_DAY, hour * 60 + minute))


def minutes_to_time(minutes: int) -> str:
    """Format a minute of day as "HH:MM". 1440 is written as "24:00"."""
    minutes = max(0, min(MINUTES_PER_DAY, int(minutes)))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time_12(time24: Optional[str]) -> str:
    """Render "13:05" as "1:05 PM"."""
    if not time24:
        return ''
    hour, minute = parse_time_of_day(time24)
    period = 'PM' if hour % 24 >= 12 else 'AM'
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {period}"


def parse_date(value: Union[str, datetime.date, datetime.datetime, None]) -> datetime.date:
    """
    Accept a date, a datetime or an ISO "YYYY-MM-DD" string.

    Raises:
        ValueError: if the value cannot be read as a calendar date
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return datetime.date.fromisoformat(text[:10])
        except ValueError:
            pass
        try:
            # specific fix for Python < 3.11 which doesn't handle 'Z' natively in fromisoformat
            return datetime.datetime.fromisoformat(text.replace('Z', '+00:00')).date()
        except ValueError:
            pass
    raise ValueError(f"Invalid calendar date: {value!r}")


def combine(day: datetime.date, minutes: int) -> datetime.datetime:
    """Local wall-clock datetime at `minutes` past midnight of `day`."""
    midnight = datetime.datetime.combine(day, datetime.time())
    return midnight + datetime.timedelta(minutes=minutes)
