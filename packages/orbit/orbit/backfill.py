"""
Migration helper for subtasks stored before orbits were tracked.

Fills in missing angles (spread evenly by stored-order index) and radii
(active-ordinal rings). Subtasks that already carry both are left alone,
and an existing angle is never rewritten. Running it twice is a no-op.

Callers must persist the result; otherwise the positions are recomputed
on the next load.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .angles import default_angle_for_index
from .config import OrbitConfig
from .radii import radius_for_active_position
from .schemas import Subtask

logger = logging.getLogger(__name__)


def backfill(
    subtasks: List[Subtask],
    belt_ring: Optional[int] = None,
    config: Optional[OrbitConfig] = None
) -> List[Subtask]:
    total = len(subtasks)
    active_position = 0
    filled = 0
    result: List[Subtask] = []

    for index, st in enumerate(subtasks):
        position = active_position
        if not st.completed:
            active_position += 1

        if st.assigned_angle is not None and st.assigned_radius is not None:
            result.append(st)
            continue

        update: Dict[str, Any] = {}
        if st.assigned_angle is None:
            update["assigned_angle"] = default_angle_for_index(index, total, config)
        if st.assigned_radius is None and not st.completed:
            # Completed subtasks keep whatever radius they had
            update["assigned_radius"] = radius_for_active_position(position, belt_ring, config)

        if update:
            filled += 1
            result.append(st.model_copy(update=update))
        else:
            result.append(st)

    if filled:
        logger.debug(f"Backfilled orbital positions for {filled}/{total} subtasks")
    return result
