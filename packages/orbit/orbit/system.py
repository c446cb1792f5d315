"""
Parent-task operations - Thread belt state through every mutation

Each operation takes a ParentTask and returns a LayoutResult holding the
new task and the belt position that was used to lay it out. The belt
position is computed exactly once per mutation and the radii are derived
from it, so callers never recompute it on their own.

Flow per mutation:
    change subtasks / belt fields
        ↓
    belt_position() (once)
        ↓
    recalculate_all_radii() with the belt's current ring
        ↓
    LayoutResult(task, belt)

Nothing here touches storage; persisting result.task is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .angles import next_angle
from .backfill import backfill
from .belt import belt_position, create_belt, move_belt
from .config import OrbitConfig
from .errors import BeltNotEnabledError, DuplicateSubtaskError, SubtaskNotFoundError
from .radii import recalculate_all_radii
from .schemas import BeltDirection, BeltPosition, BeltStatus, ParentTask, Subtask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    """Task after a mutation plus the belt position it was laid out with."""
    task: ParentTask
    belt: BeltPosition


def layout(task: ParentTask, config: Optional[OrbitConfig] = None) -> LayoutResult:
    """Recompute radii for active subtasks from the belt's current position."""
    belt = _belt_for(task)
    ring = belt.ring if belt.status is BeltStatus.RING else None
    subtasks = recalculate_all_radii(task.subtasks, ring, config)
    return LayoutResult(task=task.model_copy(update={"subtasks": subtasks}), belt=belt)


def add_subtask(
    task: ParentTask,
    subtask_id: str,
    title: str = "",
    config: Optional[OrbitConfig] = None
) -> LayoutResult:
    """
    Append a new subtask with its permanent angle.

    Raises:
        DuplicateSubtaskError: If subtask_id is already on the task
    """
    if any(st.id == subtask_id for st in task.subtasks):
        raise DuplicateSubtaskError(subtask_id, task.id)

    subtask = Subtask(
        id=subtask_id,
        title=title,
        parent_task_id=task.id,
        assigned_angle=next_angle(task.subtasks, config),
    )
    logger.info(
        f"Added subtask {subtask_id} to task {task.id} at {subtask.assigned_angle:.1f} deg"
    )
    return layout(task.model_copy(update={"subtasks": [*task.subtasks, subtask]}), config)


def set_completed(
    task: ParentTask,
    subtask_id: str,
    completed: bool,
    config: Optional[OrbitConfig] = None
) -> LayoutResult:
    """
    Complete or reopen a subtask.

    A completing subtask keeps its current radius; the others close ranks.

    Raises:
        SubtaskNotFoundError: If subtask_id is not on the task
    """
    _index_of(task, subtask_id)
    subtasks = [
        st.model_copy(update={"completed": completed}) if st.id == subtask_id else st
        for st in task.subtasks
    ]
    result = layout(task.model_copy(update={"subtasks": subtasks}), config)
    logger.info(
        f"Subtask {subtask_id} on task {task.id} "
        f"{'completed' if completed else 'reopened'}; belt {result.belt.status.value}"
    )
    return result


def delete_subtask(
    task: ParentTask,
    subtask_id: str,
    config: Optional[OrbitConfig] = None
) -> LayoutResult:
    """
    Remove a subtask.

    Raises:
        SubtaskNotFoundError: If subtask_id is not on the task
    """
    index = _index_of(task, subtask_id)
    subtasks = task.subtasks[:index] + task.subtasks[index + 1:]
    logger.info(f"Deleted subtask {subtask_id} from task {task.id}")
    return layout(task.model_copy(update={"subtasks": subtasks}), config)


def enable_belt(task: ParentTask, config: Optional[OrbitConfig] = None) -> LayoutResult:
    """Place a belt around every active subtask (outermost ring)."""
    ring, target_ids = create_belt(task.subtasks)
    updated = task.model_copy(update={
        "belt_enabled": True,
        "belt_ring": ring,
        "belt_target_ids": target_ids,
    })
    logger.info(f"Belt enabled on task {task.id} at ring {ring}")
    return layout(updated, config)


def shift_belt(
    task: ParentTask,
    direction: Union[BeltDirection, str],
    config: Optional[OrbitConfig] = None
) -> LayoutResult:
    """
    Move the belt one ring from where it is displayed now.

    Recaptures the target set from the new boundary.

    Raises:
        BeltNotEnabledError: If the task has no belt
    """
    if not task.belt_enabled:
        raise BeltNotEnabledError(task.id)

    current = _belt_for(task)
    ring, target_ids = move_belt(task.subtasks, current.ring, direction)
    updated = task.model_copy(update={"belt_ring": ring, "belt_target_ids": target_ids})
    logger.info(f"Belt on task {task.id} moved from ring {current.ring} to {ring}")
    return layout(updated, config)


def remove_belt(task: ParentTask, config: Optional[OrbitConfig] = None) -> LayoutResult:
    """Clear every belt field; subtasks fall back to plain rings."""
    updated = task.model_copy(update={
        "belt_enabled": False,
        "belt_ring": None,
        "belt_target_ids": None,
    })
    logger.info(f"Belt removed from task {task.id}")
    return layout(updated, config)


def initialize_orbits(task: ParentTask, config: Optional[OrbitConfig] = None) -> LayoutResult:
    """Backfill legacy subtasks, then lay out. Save result.task afterwards."""
    belt = _belt_for(task)
    ring = belt.ring if belt.status is BeltStatus.RING else None
    subtasks = backfill(task.subtasks, ring, config)
    return layout(task.model_copy(update={"subtasks": subtasks}), config)


def _belt_for(task: ParentTask) -> BeltPosition:
    if not task.belt_enabled:
        return BeltPosition(status=BeltStatus.NONE)
    return belt_position(task.subtasks, task.belt_ring, task.belt_target_ids)


def _index_of(task: ParentTask, subtask_id: str) -> int:
    for index, st in enumerate(task.subtasks):
        if st.id == subtask_id:
            return index
    raise SubtaskNotFoundError(subtask_id, task.id)
