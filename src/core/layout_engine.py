# File: src/core/layout_engine.py
"""
Layout engine for Radial Day.
Turns an event catalog and a target date into the arcs drawn on the dial.

Pipeline:
    1. Project events onto the target date (recurrence + clipping)
    2. Fold each occurrence onto the AM / PM rings
    3. Assign tracks per ring so overlapping events stay visible
    4. Compute free-time gaps per ring from the untracked spans
"""

import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from src.core.config_manager import Config
from src.models import (
    Event, Ring, Emphasis, Segment, Gap, BlockedArc, RingLayout, DialLayout,
    ProjectedOccurrence
)
from src.processors.recurrence_projector import project_events
from src.processors.ring_segmenter import segment_interval
from src.processors.track_assigner import assign_tracks
from src.utils.intervals import find_gaps
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class LayoutEngine:
    """
    Builds a DialLayout for one day.

    Stateless apart from its geometry settings: building twice with the
    same inputs gives equal layouts.
    """

    def __init__(self,
                 center: float = Config.DIAL_CENTER,
                 am_radius: float = Config.AM_BASE_RADIUS,
                 pm_radius: float = Config.PM_BASE_RADIUS,
                 track_step: float = Config.TRACK_STEP):
        """
        Initialize the layout engine.

        Args:
            center: Dial center (x == y) in drawing units
            am_radius: Base radius of the AM ring
            pm_radius: Base radius of the PM ring
            track_step: Radial offset added per track
        """
        self.center = center
        self.base_radii = {Ring.AM: am_radius, Ring.PM: pm_radius}
        self.track_step = track_step

    def build(self,
              events: Iterable[Event],
              target_date: datetime.date,
              focused_id: Optional[str] = None,
              sleep_window: Optional[Tuple[str, str]] = None) -> DialLayout:
        """
        Lay out `events` for `target_date`.

        Args:
            events: Full event catalog
            target_date: Day to render
            focused_id: Event to highlight; every other segment is dimmed
            sleep_window: Optional ("HH:MM", "HH:MM") drawn as blocked arcs

        Returns:
            DialLayout with segments, gaps and blocked arcs per ring
        """
        occurrences = project_events(events, target_date)

        raw: Dict[Ring, List[Segment]] = {ring: [] for ring in Ring}
        for occurrence in occurrences:
            for segment in self._segments_for(occurrence, focused_id):
                raw[segment.ring].append(segment)

        rings: Dict[Ring, RingLayout] = {}
        for ring in Ring:
            tracked = assign_tracks(raw[ring])
            gaps = [
                Gap(ring, start, end)
                for start, end in find_gaps((s.start_angle, s.end_angle) for s in raw[ring])
            ]
            rings[ring] = RingLayout(ring=ring, segments=tracked, gaps=gaps)

        if sleep_window:
            for span in segment_interval(*sleep_window):
                rings[span.ring].blocked.append(
                    BlockedArc(span.ring, span.start_angle, span.end_angle)
                )

        for ring in Ring:
            logger.debug(
                f"{ring.value} ring: {len(rings[ring].segments)} segments on "
                f"{rings[ring].track_count} tracks, {len(rings[ring].gaps)} gaps"
            )

        return DialLayout(
            target_date=target_date,
            rings=rings,
            occurrences=occurrences,
            focused_id=focused_id,
            center=self.center,
            base_radii=dict(self.base_radii),
            track_step=self.track_step,
        )

    def _segments_for(self, occurrence: ProjectedOccurrence,
                      focused_id: Optional[str]) -> List[Segment]:
        """Untracked segments of one occurrence, one per ring span."""
        if focused_id is None:
            emphasis = Emphasis.NORMAL
        elif occurrence.id == focused_id:
            emphasis = Emphasis.FOCUSED
        else:
            emphasis = Emphasis.DIMMED

        event = occurrence.display
        return [
            Segment(
                source_id=event.id,
                ring=span.ring,
                start_angle=span.start_angle,
                end_angle=span.end_angle,
                title=event.title,
                color=event.color,
                completed=event.completed,
                emphasis=emphasis,
            )
            for span in segment_interval(occurrence.start, occurrence.end)
        ]


def build_dial_layout(events: Iterable[Event],
                      target_date: datetime.date,
                      focused_id: Optional[str] = None,
                      sleep_window: Optional[Tuple[str, str]] = None) -> DialLayout:
    """Build a layout with the configured geometry."""
    return LayoutEngine().build(events, target_date, focused_id, sleep_window)
