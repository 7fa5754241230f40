# File: src/utils/intervals.py
"""
Interval algebra over dial angles: overlap test, merge and inversion.

Intervals are (start, end) pairs. An interval with end < start wraps past
the top of its domain.
"""

from typing import Iterable, List, Sequence, Tuple

Interval = Tuple[float, float]

# Nudge applied to boundaries so back-to-back intervals don't collide.
OVERLAP_EPSILON = 0.1


def is_between(target: float, start: float, end: float) -> bool:
    """Half-open membership test, wrap-aware."""
    if end < start:
        return target >= start or target <= end
    return start <= target < end


def overlaps(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    """True if either interval's boundary, nudged inward, lies in the other."""
    return (is_between(a_start + OVERLAP_EPSILON, b_start, b_end) or
            is_between(a_end - OVERLAP_EPSILON, b_start, b_end) or
            is_between(b_start + OVERLAP_EPSILON, a_start, a_end) or
            is_between(b_end - OVERLAP_EPSILON, a_start, a_end))


def merge_sorted(intervals: Sequence[Interval]) -> List[Interval]:
    """
    Coalesce intervals already sorted by start.

    Two intervals merge only when the next start is strictly before the
    running end; touching intervals stay separate.
    """
    merged: List[Interval] = []
    for start, end in intervals:
        if merged and start < merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def invert(merged: Sequence[Interval], domain_end: float = 360.0,
           domain_start: float = 0.0) -> List[Interval]:
    """Free space between merged intervals within [domain_start, domain_end)."""
    gaps: List[Interval] = []
    pointer = domain_start
    for start, end in merged:
        if start > pointer:
            gaps.append((pointer, start))
        pointer = max(pointer, end)

    if pointer < domain_end:
        gaps.append((pointer, domain_end))
    return gaps


def find_gaps(intervals: Iterable[Interval], domain_end: float = 360.0) -> List[Interval]:
    """Sort, merge and invert in one step."""
    ordered = sorted(intervals, key=lambda iv: iv[0])
    return invert(merge_sorted(ordered), domain_end)
