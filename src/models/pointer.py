# File: src/models/pointer.py
"""
Data models for dial pointer gestures.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .enums import Ring, GesturePhase
from .common import minutes_to_time


@dataclass(frozen=True)
class DragState:
    """
    Drag gesture state, owned by the caller and threaded through
    PointerMapper.transition().
    """
    phase: GesturePhase = GesturePhase.IDLE
    locked: bool = False

    # Pointer-down position: raw angle plus snapped angle
    start_raw_angle: Optional[float] = None
    start_angle: Optional[float] = None
    start_ring: Optional[Ring] = None

    # Latest pointer position: raw angle plus snapped angle
    current_raw_angle: Optional[float] = None
    current_angle: Optional[float] = None
    current_ring: Optional[Ring] = None

    @property
    def is_dragging(self) -> bool:
        return self.phase == GesturePhase.DRAGGING


@dataclass(frozen=True)
class ClickSelection:
    """A tap on a single hour slot."""
    hour24: int

    def to_interval(self) -> Tuple[str, str]:
        """One-hour interval starting at the tapped hour."""
        start = minutes_to_time(self.hour24 * 60)
        end = minutes_to_time(((self.hour24 + 1) % 24) * 60)
        return start, end


@dataclass(frozen=True)
class RangeSelection:
    """A dragged time range; end <= start means it crosses midnight."""
    start: str
    end: str

    def to_interval(self) -> Tuple[str, str]:
        return self.start, self.end
