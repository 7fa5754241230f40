# File: src/models/layout.py
"""
Data models for the rendered dial: ring spans, segments, gaps and the
per-ring / per-day layout containers handed to the renderer.
"""

import datetime
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .enums import Ring, Emphasis
from .occurrence import ProjectedOccurrence
from src.utils.angle_math import minutes_to_angle, describe_arc, track_radius

# Opacity levels used by the renderer
NORMAL_OPACITY = 0.9
FOCUSED_OPACITY = 1.0
DIMMED_OPACITY = 0.1
COMPLETED_FACTOR = 0.6


@dataclass(frozen=True)
class RingSpan:
    """Part of a clock interval confined to one ring, in ring-relative minutes (0-720)."""
    ring: Ring
    start_minute: int
    end_minute: int

    @property
    def start_angle(self) -> float:
        return minutes_to_angle(self.start_minute)

    @property
    def end_angle(self) -> float:
        return minutes_to_angle(self.end_minute)


@dataclass(frozen=True)
class Segment:
    """Drawable arc for one event's occupancy of a ring."""
    source_id: str
    ring: Ring
    start_angle: float
    end_angle: float
    track: int = 0

    # Pass-through presentation attributes
    title: str = ''
    color: Optional[str] = None
    completed: bool = False
    emphasis: Emphasis = Emphasis.NORMAL

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def opacity(self) -> float:
        """Opacity the renderer should apply to this arc."""
        if self.emphasis == Emphasis.FOCUSED:
            opacity = FOCUSED_OPACITY
        elif self.emphasis == Emphasis.DIMMED:
            opacity = DIMMED_OPACITY
        else:
            opacity = NORMAL_OPACITY
        return round(opacity * COMPLETED_FACTOR, 3) if self.completed else opacity

    def to_dict(self) -> dict:
        return {
            'source_id': self.source_id,
            'ring': self.ring.value,
            'start_angle': self.start_angle,
            'end_angle': self.end_angle,
            'track': self.track,
            'title': self.title,
            'color': self.color,
            'completed': self.completed,
            'emphasis': self.emphasis.value,
        }


@dataclass(frozen=True)
class Arc:
    """Plain angular region on a ring."""
    ring: Ring
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    def to_dict(self) -> dict:
        return {
            'ring': self.ring.value,
            'start_angle': self.start_angle,
            'end_angle': self.end_angle,
        }


@dataclass(frozen=True)
class Gap(Arc):
    """Free time on a ring."""


@dataclass(frozen=True)
class BlockedArc(Arc):
    """Sleep window drawn on a ring. Has no effect on gaps or tracks."""


@dataclass
class RingLayout:
    """Segments (with tracks), gaps and blocked arcs of a single ring."""
    ring: Ring
    segments: List[Segment] = field(default_factory=list)
    gaps: List[Gap] = field(default_factory=list)
    blocked: List[BlockedArc] = field(default_factory=list)

    @property
    def track_count(self) -> int:
        return max((s.track for s in self.segments), default=-1) + 1

    def free_degrees(self) -> float:
        return sum(g.sweep for g in self.gaps)

    def to_dict(self) -> dict:
        return {
            'ring': self.ring.value,
            'segments': [s.to_dict() for s in self.segments],
            'gaps': [g.to_dict() for g in self.gaps],
            'blocked': [b.to_dict() for b in self.blocked],
        }


@dataclass
class DialLayout:
    """Everything needed to draw one day on the dial."""
    target_date: datetime.date
    rings: Dict[Ring, RingLayout]
    occurrences: List[ProjectedOccurrence] = field(default_factory=list)
    focused_id: Optional[str] = None

    # Geometry used by the path helpers
    center: float = 200.0
    base_radii: Dict[Ring, float] = field(default_factory=lambda: {Ring.AM: 85, Ring.PM: 145})
    track_step: float = 12

    @property
    def focus_mode(self) -> bool:
        return self.focused_id is not None

    @property
    def segments(self) -> List[Segment]:
        return [s for ring in Ring for s in self.rings[ring].segments]

    def segments_for(self, ring: Ring) -> List[Segment]:
        return self.rings[ring].segments

    def gaps_for(self, ring: Ring) -> List[Gap]:
        return self.rings[ring].gaps

    def segment_radius(self, segment: Segment) -> float:
        """Base radius of the segment's ring pushed outward by its track."""
        return track_radius(self.base_radii[segment.ring], segment.track, self.track_step)

    def segment_path(self, segment: Segment) -> str:
        return describe_arc(self.center, self.center, self.segment_radius(segment),
                            segment.start_angle, segment.end_angle)

    def gap_path(self, gap: Arc) -> str:
        return describe_arc(self.center, self.center, self.base_radii[gap.ring],
                            gap.start_angle, gap.end_angle)

    def to_dict(self) -> dict:
        return {
            'date': self.target_date.isoformat(),
            'focused_id': self.focused_id,
            'rings': [self.rings[ring].to_dict() for ring in Ring],
        }
