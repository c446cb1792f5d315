"""
Belt Position Tracker - Priority belt ring tracking

The belt is anchored in stacking order, not to a numeric ring: it always
sits just outside the last of its original target subtasks. As targets in
front of it complete and leave the active view, the belt slides inward
with them, but it never re-includes subtasks that were not part of the
original priority set.

Ring rules:
- Ring 1 belongs to the innermost active subtask, never the belt
- A placed belt is on a ring in [2, active_count + 1]
- Ring 0 is celebration mode (every remaining target completed)

Target ids are captured only by create_belt() and move_belt().
"""

from __future__ import annotations

import logging
from typing import AbstractSet, FrozenSet, List, Optional, Tuple, Union

from .schemas import BeltDirection, BeltPosition, BeltStatus, Subtask

logger = logging.getLogger(__name__)

MIN_BELT_RING = 2


def belt_position(
    subtasks: List[Subtask],
    belt_ring: Optional[int],
    target_ids: Optional[AbstractSet[str]]
) -> BeltPosition:
    """
    Current belt status and ring given completions since it was placed.

    Args:
        subtasks: Current collection in stored order
        belt_ring: Ring the belt was placed on (None/0 = no belt)
        target_ids: Ids captured when the belt was placed

    Returns:
        BeltPosition: NONE when there is no belt or every target was
        deleted, CELEBRATING when all surviving targets are completed,
        otherwise RING with the ring the belt sits on now
    """
    if not belt_ring or not target_ids:
        return BeltPosition(status=BeltStatus.NONE)

    present = [st for st in subtasks if st.id in target_ids]
    if not present:
        # Every target deleted: belt vanishes
        return BeltPosition(status=BeltStatus.NONE)

    if all(st.completed for st in present):
        return BeltPosition(status=BeltStatus.CELEBRATING)

    # Last target in stored order, completed or not
    last_target_index = max(
        i for i, st in enumerate(subtasks) if st.id in target_ids
    )
    active_count = sum(
        1 for st in subtasks[:last_target_index + 1] if not st.completed
    )
    return BeltPosition(status=BeltStatus.RING, ring=active_count + 1)


def current_belt_ring(
    subtasks: List[Subtask],
    belt_ring: Optional[int],
    target_ids: Optional[AbstractSet[str]]
) -> int:
    """Ring the belt sits on now; 0 when there is no belt or it is celebrating."""
    return belt_position(subtasks, belt_ring, target_ids).ring


def create_belt(subtasks: List[Subtask]) -> Tuple[int, FrozenSet[str]]:
    """
    Place a new belt around every active subtask.

    Returns:
        (ring, target_ids): outermost ring and all active ids, or
        (0, frozenset()) when there is nothing active to prioritize
    """
    active_ids = [st.id for st in subtasks if not st.completed]
    if not active_ids:
        return 0, frozenset()

    ring = len(active_ids) + 1
    logger.debug(f"Belt created on ring {ring} around {len(active_ids)} subtasks")
    return ring, frozenset(active_ids)


def move_belt(
    subtasks: List[Subtask],
    current_ring: int,
    direction: Union[BeltDirection, str]
) -> Tuple[int, FrozenSet[str]]:
    """
    Move the belt one ring inward or outward and recapture its targets.

    Out-of-range rings are clamped into [2, active_count + 1].

    Args:
        subtasks: Current collection in stored order
        current_ring: Ring the belt is on now (see current_belt_ring)
        direction: BeltDirection or its string value

    Returns:
        (ring, target_ids): the new ring and the first ring - 1 active ids;
        (0, frozenset()) when no subtask is active
    """
    direction = BeltDirection(direction)
    active_ids = [st.id for st in subtasks if not st.completed]
    if not active_ids:
        return 0, frozenset()

    max_ring = len(active_ids) + 1
    if direction is BeltDirection.INWARD:
        ring = max(MIN_BELT_RING, current_ring - 1)
    else:
        ring = min(max_ring, current_ring + 1)
    ring = min(max_ring, max(MIN_BELT_RING, ring))

    logger.debug(f"Belt moved {direction.value}: ring {current_ring} -> {ring}")
    return ring, frozenset(active_ids[:ring - 1])
