"""
Orbital invariant checks for stored subtask collections.

Errors mean the collection will misbehave (jumps on completion, overlapping
rings, belt on an illegal ring). Warnings flag angles far from their index
default, which is normal after gap placement but suspicious for data that
was only ever backfilled.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, List, Optional

from .angles import default_angle_for_index
from .schemas import Subtask, ValidationResult

logger = logging.getLogger(__name__)

ANGLE_TOLERANCE_DEG = 5.0


def validate_orbital_invariants(
    subtasks: List[Subtask],
    task_id: str,
    belt_ring: Optional[int] = None,
    belt_target_ids: Optional[AbstractSet[str]] = None
) -> ValidationResult:
    """
    Check a collection against the orbital invariants.

    Args:
        subtasks: Collection in stored order
        task_id: Parent task id (used in messages)
        belt_ring: Placed belt ring, if any
        belt_target_ids: Belt targets, if any

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    total = len(subtasks)
    for index, st in enumerate(subtasks):
        if st.assigned_angle is None:
            result.errors.append(
                f"[{task_id}] Subtask \"{st.title}\" ({st.id}) missing assigned_angle; "
                f"it will jump on completion. Run backfill() and save the task."
            )
        else:
            expected = default_angle_for_index(index, total)
            diff = abs(st.assigned_angle - expected)
            if ANGLE_TOLERANCE_DEG < diff < 360 - ANGLE_TOLERANCE_DEG:
                result.warnings.append(
                    f"[{task_id}] Subtask \"{st.title}\" angle {st.assigned_angle:.1f} "
                    f"differs from index default {expected:.1f} (index {index})."
                )

        if st.assigned_radius is None and not st.completed:
            result.errors.append(
                f"[{task_id}] Subtask \"{st.title}\" ({st.id}) missing assigned_radius. "
                f"Run backfill() and save the task."
            )

    radii = [
        st.assigned_radius for st in subtasks
        if not st.completed and st.assigned_radius is not None
    ]
    for inner, outer in zip(radii, radii[1:]):
        if outer <= inner:
            result.errors.append(
                f"[{task_id}] Active radii not strictly increasing ({inner} then {outer})."
            )
            break

    if belt_ring == 1:
        result.errors.append(
            f"[{task_id}] Belt placed on ring 1, which belongs to the innermost subtask."
        )
    elif belt_ring and not belt_target_ids:
        result.warnings.append(
            f"[{task_id}] Belt on ring {belt_ring} has no target subtasks and will not show."
        )

    return result


def log_validation_results(result: ValidationResult, task_title: Optional[str] = None) -> None:
    """Log errors and warnings; a clean result logs nothing."""
    prefix = f"[Orbital Validation: {task_title}]" if task_title else "[Orbital Validation]"

    for error in result.errors:
        logger.error(f"{prefix} {error}")
    for warning in result.warnings:
        logger.warning(f"{prefix} {warning}")
