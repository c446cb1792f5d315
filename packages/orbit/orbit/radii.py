"""
Radius Assignment - Ring tiers for active subtasks

Active subtasks fill rings 1, 2, 3... inward in stored order, so when one
completes everything behind it slides one ring closer to the parent.
Completed subtasks are never touched again: they keep the radius they had
when they completed.

When a priority belt sits on ring N, subtasks that would land on ring N or
beyond are pushed out by one ring plus a buffer on each side of the belt.
"""

from __future__ import annotations

import math
from typing import List, Optional

from .config import OrbitConfig, resolve_config
from .schemas import Subtask


def radius_for_active_position(
    active_position: int,
    belt_ring: Optional[int] = None,
    config: Optional[OrbitConfig] = None
) -> float:
    """
    Radius for the subtask at ``active_position`` among active subtasks.

    Args:
        active_position: Zero-based rank among active subtasks
        belt_ring: Current belt ring; None or 0 means no belt spacing
        config: Geometry constants

    Returns:
        Radius in pixels
    """
    cfg = resolve_config(config)
    base = cfg.min_radius + active_position * cfg.ring_spacing

    if not belt_ring:
        return base

    ring = active_position + 1
    if ring < belt_ring:
        return base

    # Outside the belt: skip the belt's ring and leave a buffer on both sides
    return (
        cfg.min_radius
        + (active_position + 1) * cfg.ring_spacing
        + 2 * cfg.belt_buffer
    )


def recalculate_all_radii(
    subtasks: List[Subtask],
    belt_ring: Optional[int] = None,
    config: Optional[OrbitConfig] = None
) -> List[Subtask]:
    """Return a new collection with radii recomputed for active subtasks.

    Order, ids and angles are untouched; completed subtasks are copied through.
    """
    active_position = 0
    result: List[Subtask] = []
    for st in subtasks:
        if st.completed:
            result.append(st)
            continue
        radius = radius_for_active_position(active_position, belt_ring, config)
        active_position += 1
        result.append(
            st if st.assigned_radius == radius
            else st.model_copy(update={"assigned_radius": radius})
        )
    return result


def next_radius(
    subtasks: List[Subtask],
    belt_ring: Optional[int] = None,
    config: Optional[OrbitConfig] = None
) -> float:
    """Radius a subtask appended right now would receive."""
    active_count = sum(1 for st in subtasks if not st.completed)
    return radius_for_active_position(active_count, belt_ring, config)


# Belt marker geometry

def marker_radius(ring: int, config: Optional[OrbitConfig] = None) -> float:
    """
    Radius of the belt marker itself.

    Ring 0 is celebration mode: a fixed ring around the parent task rather
    than an orbital ring. Any other ring sits one buffer outside that ring's
    base radius, halfway between the subtasks on either side of it.
    """
    cfg = resolve_config(config)
    if ring == 0:
        return cfg.celebration_radius
    return cfg.min_radius + (ring - 1) * cfg.ring_spacing + cfg.belt_buffer


def radius_to_ring(radius: float, config: Optional[OrbitConfig] = None) -> int:
    """Nearest 1-based ring for a radius (drag interactions). Never below 1."""
    cfg = resolve_config(config)
    # Half-up rounding, not banker's rounding
    ring = math.floor((radius - cfg.min_radius) / cfg.ring_spacing + 0.5) + 1
    return max(1, ring)


def default_marker_ring(subtask_count: int) -> int:
    """Suggested belt ring: ring 3 with 3+ subtasks, else just outside them."""
    if subtask_count >= 3:
        return 3
    if subtask_count > 0:
        return subtask_count + 1
    return 1
