# File: src/processors/recurrence_projector.py
"""
Recurrence projection module for Radial Day.
Selects the events that touch a given calendar day and clips them to it.
"""

import datetime
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from src.models import Event, ProjectedOccurrence, Recurrence
from src.models.common import time_to_minutes
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

DateTimeRange = Tuple[datetime.datetime, datetime.datetime]


def day_window(target_date: datetime.date) -> DateTimeRange:
    """Half-open [00:00, next 00:00) window of a calendar day."""
    start = datetime.datetime.combine(target_date, datetime.time())
    return start, start + datetime.timedelta(days=1)


def _format_bound(moment: datetime.datetime, day_start: datetime.datetime) -> str:
    """HH:MM of a clipped bound; the following midnight is written 24:00."""
    minutes = int((moment - day_start).total_seconds() // 60)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _relevant_range(event: Event, target_date: datetime.date) -> Optional[DateTimeRange]:
    """Effective start/end of `event` for `target_date`, or None if it doesn't apply."""
    base_start, base_end = event.base_interval()

    if event.recurrence == Recurrence.DAILY:
        return event.anchored_to(target_date)

    if event.recurrence == Recurrence.WEEKLY:
        if base_start.weekday() == target_date.weekday():
            return event.anchored_to(target_date)
        return None

    if event.recurrence == Recurrence.MONTHLY:
        if base_start.day == target_date.day:
            return event.anchored_to(target_date)
        return None

    # Non-recurring: its own day, or spill-over from the previous evening
    if event.date == target_date:
        return base_start, base_end

    day_start, day_end = day_window(target_date)
    if base_start < day_end and base_end > day_start:
        return base_start, base_end
    return None


def project_event(event: Event, target_date: datetime.date) -> Optional[ProjectedOccurrence]:
    """
    Project one event onto `target_date`.

    Returns:
        The clipped occurrence, or None when the event does not touch the day
    """
    effective = _relevant_range(event, target_date)
    if effective is None:
        return None

    day_start, day_end = day_window(target_date)
    show_start = max(effective[0], day_start)
    show_end = min(effective[1], day_end)

    if show_start >= show_end:
        logger.debug(f"Event '{event.title}' ({event.id}) is empty after clipping to {target_date}")
        return None

    display = replace(
        event,
        date=target_date,
        start=_format_bound(show_start, day_start),
        end=_format_bound(show_end, day_start),
    )
    return ProjectedOccurrence(
        source=event,
        display=display,
        effective_start=show_start,
        effective_end=show_end,
    )


def project_events(events: Iterable[Event], target_date: datetime.date) -> List[ProjectedOccurrence]:
    """
    Project the whole catalog onto `target_date`.

    Recurrence rules:
        - daily: every day
        - weekly: same weekday as the anchor date
        - monthly: same day of month as the anchor date
        - none: the anchor date, plus the next day when it runs past midnight

    Every occurrence is clipped to the target day and the result is sorted
    by start time.

    Example:
        >>> ev = Event("1", "Late shift", datetime.date(2024, 1, 1), "23:00", "01:00")
        >>> [(o.start, o.end) for o in project_events([ev], datetime.date(2024, 1, 2))]
        [('00:00', '01:00')]
    """
    events = list(events)
    logger.debug(f"Projecting {len(events)} events onto {target_date.isoformat()}")

    occurrences: List[ProjectedOccurrence] = []
    for event in events:
        occurrence = project_event(event, target_date)
        if occurrence is None:
            continue
        occurrences.append(occurrence)
        logger.debug(
            f"Including '{event.title}' ({event.recurrence.value}) "
            f"{occurrence.start}-{occurrence.end}"
        )

    occurrences.sort(key=lambda o: time_to_minutes(o.start))

    logger.info(
        f"Projected {len(occurrences)} of {len(events)} events onto {target_date.isoformat()}"
    )
    return occurrences
