"""
Angle Assignment - Permanent angular slots for subtasks

Each subtask receives its starting angle exactly once, when it is created,
and keeps it for its whole lifetime. New subtasks are dropped into the
middle of the widest empty arc between the active subtasks so the orbit
stays evenly spread without moving anything that is already there.

Angles are degrees, with -90 at the top of the circle.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import OrbitConfig, resolve_config
from .schemas import Subtask

logger = logging.getLogger(__name__)


def next_angle(subtasks: List[Subtask], config: Optional[OrbitConfig] = None) -> float:
    """
    Angle for a subtask about to be appended to ``subtasks``.

    Uses the largest-gap strategy over active subtasks that already have an
    angle. Ties go to the first gap in ascending angle order.

    Args:
        subtasks: Current collection (not mutated)
        config: Geometry constants (default angle)

    Returns:
        Angle in degrees
    """
    cfg = resolve_config(config)
    angles = [
        st.assigned_angle
        for st in subtasks
        if not st.completed and st.assigned_angle is not None
    ]

    if not angles:
        return cfg.default_angle

    if len(angles) == 1:
        # Diametrically opposite the only one
        return (angles[0] + 180) % 360

    # Stored angles mix ranges ([0, 360) and (-180, 180]); compare on one circle
    angles = sorted(a % 360 for a in angles)

    largest_gap = 0.0
    largest_gap_start = 0.0
    for i, current in enumerate(angles):
        following = angles[(i + 1) % len(angles)]
        # Wraps across 360 for the last -> first pair
        gap = following - current if following > current else (360 - current) + following
        if gap > largest_gap:
            largest_gap = gap
            largest_gap_start = current

    angle = (largest_gap_start + largest_gap / 2) % 360
    if angle > 180:
        angle -= 360

    logger.debug(
        f"Largest gap {largest_gap:.1f} deg starting at {largest_gap_start:.1f}, "
        f"placing new subtask at {angle:.1f}"
    )
    return angle


def default_angle_for_index(
    index: int,
    total: int,
    config: Optional[OrbitConfig] = None
) -> float:
    """Evenly spread ``total`` slots clockwise from the top; used for legacy data."""
    cfg = resolve_config(config)
    if total <= 0:
        return cfg.default_angle
    return (360 / total) * index + cfg.default_angle


def stable_animation_delay(subtask_id: str) -> int:
    """
    Animation phase offset in seconds (0 to -29) derived from the id.

    Keeps each moon's animation state stable even when indices change.
    """
    h = 0
    encoded = subtask_id.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = _to_int32(h * 31 + code_unit)
    return -(abs(h) % 30)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value
