# File: src/processors/track_assigner.py
"""
Track assignment for overlapping segments.

Greedy first-fit colouring of the interval graph: segments are visited in
start-angle order and each takes the lowest track whose segments it does
not overlap. Optimal for the short, non-circular overlaps a dial sees;
not guaranteed minimal for every topology.
"""

from dataclasses import replace
from typing import List, Sequence

from src.models import Segment
from src.utils.intervals import overlaps
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def assign_tracks(segments: Sequence[Segment]) -> List[Segment]:
    """
    Return copies of `segments` with a track set, ordered by start angle.

    Ties on start angle keep their input order (sorted() is stable).
    """
    placed: List[Segment] = []

    for segment in sorted(segments, key=lambda s: s.start_angle):
        track = 0
        while any(
            p.track == track and overlaps(segment.start_angle, segment.end_angle,
                                          p.start_angle, p.end_angle)
            for p in placed
        ):
            track += 1

        if track:
            logger.debug(f"Segment '{segment.title}' ({segment.source_id}) pushed to track {track}")
        placed.append(replace(segment, track=track))

    return placed


def track_count(segments: Sequence[Segment]) -> int:
    """Number of tracks in use (0 for no segments)."""
    return max((s.track for s in segments), default=-1) + 1
