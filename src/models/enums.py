# File: src/models/enums.py

from enum import Enum


class Ring(Enum):
    """Concentric 12-hour bands of the dial."""
    AM = "AM"  # inner ring, 00:00-12:00
    PM = "PM"  # outer ring, 12:00-24:00

    @property
    def offset_minutes(self) -> int:
        """Minute of day at which this ring starts."""
        return RING_OFFSETS[self]

    @classmethod
    def for_minute(cls, minute_of_day: int) -> "Ring":
        """Ring that contains the given minute of day (0-1439)."""
        return cls.PM if minute_of_day % 1440 >= 720 else cls.AM


RING_OFFSETS = {Ring.AM: 0, Ring.PM: 720}


class Recurrence(Enum):
    """Event repetition options."""
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"    # same weekday as the anchor date
    MONTHLY = "monthly"  # same day of month as the anchor date


class Emphasis(Enum):
    """Visual weight of a segment when an event is focused."""
    NORMAL = "normal"
    FOCUSED = "focused"
    DIMMED = "dimmed"


class GesturePhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class PointerAction(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    LEAVE = "leave"
