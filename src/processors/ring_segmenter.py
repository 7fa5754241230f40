# File: src/processors/ring_segmenter.py
"""
Ring segmentation module.
Folds a clock interval onto the AM and PM rings of the dial.
"""

from typing import List, Tuple

from src.models import Ring, RingSpan
from src.models.common import time_to_minutes, MINUTES_PER_DAY
from src.models.enums import RING_OFFSETS
from src.utils.angle_math import RING_MINUTES


def split_at_midnight(start_min: int, end_min: int) -> List[Tuple[int, int]]:
    """
    Split a minute-of-day interval at midnight.

    end <= start is a rollover: [start, 1440) and [0, end).
    """
    if end_min <= start_min:
        return [(start_min, MINUTES_PER_DAY), (0, end_min)]
    return [(start_min, end_min)]


def segment_minutes(start_min: int, end_min: int) -> List[RingSpan]:
    """Ring spans for a minute-of-day interval, in clock order."""
    spans: List[RingSpan] = []

    for part_start, part_end in split_at_midnight(start_min, end_min):
        for ring in Ring:
            lo = RING_OFFSETS[ring]
            hi = lo + RING_MINUTES
            overlap_start = max(part_start, lo)
            overlap_end = min(part_end, hi)
            if overlap_start < overlap_end:
                spans.append(RingSpan(ring, overlap_start - lo, overlap_end - lo))

    return spans


def segment_interval(start: str, end: str) -> List[RingSpan]:
    """
    Ring spans for an "HH:MM" interval that may cross midnight.

    Yields at most four spans: two from a midnight split, each of which may
    be split again at noon.

    Example:
        >>> [(s.ring.value, s.start_angle, s.end_angle) for s in segment_interval("11:00", "13:00")]
        [('AM', 330.0, 360.0), ('PM', 0.0, 30.0)]
    """
    return segment_minutes(time_to_minutes(start), time_to_minutes(end))
