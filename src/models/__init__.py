from .enums import Ring, Recurrence, Emphasis, GesturePhase, PointerAction
from .common import parse_time_of_day, time_to_minutes, minutes_to_time, format_time_12, parse_date
from .event import Event, event_from_dict
from .occurrence import ProjectedOccurrence
from .layout import RingSpan, Segment, Arc, Gap, BlockedArc, RingLayout, DialLayout
from .pointer import DragState, ClickSelection, RangeSelection

__all__ = [
    "Ring",
    "Recurrence",
    "Emphasis",
    "GesturePhase",
    "PointerAction",
    "parse_time_of_day",
    "time_to_minutes",
    "minutes_to_time",
    "format_time_12",
    "parse_date",
    "Event",
    "event_from_dict",
    "ProjectedOccurrence",
    "RingSpan",
    "Segment",
    "Arc",
    "Gap",
    "BlockedArc",
    "RingLayout",
    "DialLayout",
    "DragState",
    "ClickSelection",
    "RangeSelection",
]
