# File: src/models/event.py

import datetime
from dataclasses import dataclass
from typing import Optional, Tuple

from .enums import Recurrence
from .common import parse_date, time_to_minutes, combine, MINUTES_PER_DAY


@dataclass
class Event:
    """A scheduled appointment, optionally repeating."""
    id: str
    title: str
    date: datetime.date  # anchor date (first occurrence for recurring events)
    start: str           # "HH:MM"
    end: str             # "HH:MM", <= start means the event crosses midnight
    recurrence: Recurrence = Recurrence.NONE

    # Presentation metadata, opaque to layout
    color: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False

    def __post_init__(self):
        """Validate and convert types."""
        if not isinstance(self.date, datetime.date) or isinstance(self.date, datetime.datetime):
            self.date = parse_date(self.date)

        if isinstance(self.recurrence, str):
            try:
                self.recurrence = Recurrence(self.recurrence.strip().lower())
            except ValueError:
                self.recurrence = Recurrence.NONE
        elif not isinstance(self.recurrence, Recurrence):
            self.recurrence = Recurrence.NONE

    @property
    def is_recurring(self) -> bool:
        return self.recurrence != Recurrence.NONE

    def crosses_midnight(self) -> bool:
        """True when the end time is at or before the start time."""
        return time_to_minutes(self.end) <= time_to_minutes(self.start)

    def duration_minutes(self) -> int:
        """Duration, counting a midnight rollover as +24h."""
        start_min = time_to_minutes(self.start)
        end_min = time_to_minutes(self.end)
        if end_min <= start_min:
            end_min += MINUTES_PER_DAY
        return end_min - start_min

    def anchored_to(self, day: datetime.date) -> Tuple[datetime.datetime, datetime.datetime]:
        """Start/end datetimes of this event's times placed on `day`."""
        start_dt = combine(day, time_to_minutes(self.start))
        end_dt = combine(day, time_to_minutes(self.end))
        if end_dt <= start_dt:
            end_dt += datetime.timedelta(days=1)
        return start_dt, end_dt

    def base_interval(self) -> Tuple[datetime.datetime, datetime.datetime]:
        """Start/end datetimes on the anchor date."""
        return self.anchored_to(self.date)

    def to_dict(self) -> dict:
        """Convert to the JSON shape used by the event catalog."""
        return {
            'id': self.id,
            'title': self.title,
            'date': self.date.isoformat(),
            'start': self.start,
            'end': self.end,
            'recurrence': self.recurrence.value,
            'color': self.color,
            'category': self.category,
            'description': self.description,
            'completed': self.completed,
        }


def event_from_dict(data: dict) -> Event:
    """Create Event from dictionary with robust enum/boolean parsing."""
    raw_completed = str(data.get('completed', False)).lower()

    return Event(
        id=str(data.get('id', '')),
        title=str(data.get('title') or 'Untitled Event'),
        date=data.get('date'),
        start=str(data.get('start', '00:00')),
        end=str(data.get('end', '00:00')),
        recurrence=data.get('recurrence') or Recurrence.NONE,
        color=data.get('color'),
        category=data.get('category'),
        description=data.get('description'),
        completed=raw_completed in ['yes', 'true', '1', 'y', 't'],
    )
