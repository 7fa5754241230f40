# File: src/processors/pointer_mapper.py
"""
Pointer mapping module.
Turns taps and drags on the dial into clock times.
"""

import math
from dataclasses import replace
from typing import Optional, Tuple, Union

from src.core.config_manager import Config
from src.models import (
    Ring, GesturePhase, PointerAction, DragState, ClickSelection, RangeSelection
)
from src.utils.angle_math import cartesian_to_polar, FULL_TURN
from src.utils.logger import LoggerMixin

Selection = Union[ClickSelection, RangeSelection]

DEGREES_PER_HOUR = 30


def point_to_polar(x: float, y: float,
                   center: Tuple[float, float] = (Config.DIAL_CENTER, Config.DIAL_CENTER)
                   ) -> Tuple[float, float]:
    """(distance, angle) of a pointer position relative to the dial center."""
    return cartesian_to_polar(x, y, center[0], center[1])


def ring_for_distance(distance: float,
                      am_radius: float = Config.AM_BASE_RADIUS,
                      pm_radius: float = Config.PM_BASE_RADIUS) -> Ring:
    """Inside the midpoint between the two base radii is AM, outside is PM."""
    return Ring.AM if distance < (am_radius + pm_radius) / 2 else Ring.PM


def snap_angle(angle: float, step: float = Config.SNAP_DEGREES) -> float:
    """Round to the nearest `step` degrees, folded into [0, 360)."""
    return (math.floor(angle / step + 0.5) * step) % FULL_TURN


def angle_distance(a: float, b: float) -> float:
    """Shortest way around the dial between two angles."""
    diff = abs(a - b) % FULL_TURN
    return min(diff, FULL_TURN - diff)


def hour_for_angle(angle: float, ring: Ring) -> int:
    """Hour bucket (0-23) of an angle on a ring."""
    hour = int(math.floor((angle % FULL_TURN) / DEGREES_PER_HOUR))
    if ring == Ring.PM:
        hour += 12
    return hour % 24


def time_for_angle(angle: float, ring: Ring) -> str:
    """"HH:MM" for an angle on a ring, minutes rounded to a quarter hour."""
    hour = hour_for_angle(angle, ring)
    minutes_into_hour = ((angle % FULL_TURN) % DEGREES_PER_HOUR) * 2
    minute = int(math.floor(minutes_into_hour / 15 + 0.5)) * 15
    if minute == 60:
        minute = 0
        hour = (hour + 1) % 24
    return f"{hour:02d}:{minute:02d}"


def hour_slot_interval(hour24: int) -> Tuple[str, str]:
    """Default one-hour interval for a tapped hour slot."""
    return ClickSelection(hour24 % 24).to_interval()


def in_click_zone(distance: float,
                  am_zone: Tuple[float, float] = (Config.AM_CLICK_INNER, Config.AM_CLICK_OUTER),
                  pm_zone: Tuple[float, float] = (Config.PM_CLICK_INNER, Config.PM_CLICK_OUTER)
                  ) -> bool:
    """True when a distance from the center falls on the AM or PM click band."""
    return am_zone[0] <= distance <= am_zone[1] or pm_zone[0] <= distance <= pm_zone[1]


def set_locked(state: DragState, locked: bool) -> DragState:
    """Lock or unlock drawing on the dial; locking ends any drag in progress."""
    if locked:
        return DragState(locked=True)
    return replace(state, locked=False)


class PointerMapper(LoggerMixin):
    """
    Click/drag state machine for the dial.

    Idle --down (unlocked)--> Dragging --move--> Dragging --up/leave--> Idle.
    The state is an immutable DragState owned by the caller.
    """

    def __init__(self,
                 center: Tuple[float, float] = (Config.DIAL_CENTER, Config.DIAL_CENTER),
                 am_radius: float = Config.AM_BASE_RADIUS,
                 pm_radius: float = Config.PM_BASE_RADIUS,
                 snap_step: float = Config.SNAP_DEGREES,
                 click_epsilon: float = Config.CLICK_EPSILON_DEGREES,
                 am_zone: Tuple[float, float] = (Config.AM_CLICK_INNER, Config.AM_CLICK_OUTER),
                 pm_zone: Tuple[float, float] = (Config.PM_CLICK_INNER, Config.PM_CLICK_OUTER)):
        self.center = center
        self.am_radius = am_radius
        self.pm_radius = pm_radius
        self.snap_step = snap_step
        self.click_epsilon = click_epsilon
        self.am_zone = am_zone
        self.pm_zone = pm_zone

    def locate(self, x: float, y: float) -> Tuple[float, float, Ring]:
        """Distance from center, raw angle and ring under a pointer position."""
        distance, angle = point_to_polar(x, y, self.center)
        return distance, angle, ring_for_distance(distance, self.am_radius, self.pm_radius)

    def transition(self, state: DragState, action: PointerAction,
                   x: Optional[float] = None,
                   y: Optional[float] = None) -> Tuple[DragState, Optional[Selection]]:
        """
        Apply one pointer event.

        Args:
            state: Current gesture state
            action: DOWN, MOVE, UP or LEAVE
            x, y: Pointer position; may be omitted for LEAVE

        Returns:
            (new state, selection or None). A selection is only produced
            when a drag is finalized.
        """
        has_point = x is not None and y is not None

        if action == PointerAction.DOWN:
            if state.locked or state.is_dragging or not has_point:
                return state, None
            distance, raw_angle, ring = self.locate(x, y)
            if not in_click_zone(distance, self.am_zone, self.pm_zone):
                self.logger.debug(f"Pointer-down at distance {distance:.1f} is off the click bands")
                return state, None
            snapped = snap_angle(raw_angle, self.snap_step)
            return replace(
                state,
                phase=GesturePhase.DRAGGING,
                start_raw_angle=raw_angle,
                start_angle=snapped,
                start_ring=ring,
                current_raw_angle=raw_angle,
                current_angle=snapped,
                current_ring=ring,
            ), None

        if not state.is_dragging:
            return state, None

        if has_point:
            _, raw_angle, ring = self.locate(x, y)
            state = replace(state, current_raw_angle=raw_angle,
                            current_angle=snap_angle(raw_angle, self.snap_step),
                            current_ring=ring)

        if action == PointerAction.MOVE:
            return state, None

        # UP and LEAVE both finalize the gesture
        selection = self._finalize(state)
        return DragState(locked=state.locked), selection

    def is_click(self, state: DragState) -> bool:
        """
        A gesture is a click when the pointer barely moved or both ends snap
        to the same slot.
        """
        if angle_distance(state.start_raw_angle, state.current_raw_angle) < self.click_epsilon:
            return True
        return angle_distance(state.start_angle, state.current_angle) == 0

    def _finalize(self, state: DragState) -> Selection:
        if self.is_click(state):
            hour = hour_for_angle(state.start_raw_angle, state.start_ring)
            self.logger.debug(f"Gesture read as click on hour {hour}")
            return ClickSelection(hour)

        start = time_for_angle(state.start_angle, state.start_ring)
        end = time_for_angle(state.current_angle, state.current_ring)
        self.logger.debug(f"Gesture read as range {start}-{end}")
        return RangeSelection(start, end)
