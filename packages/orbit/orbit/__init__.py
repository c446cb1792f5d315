"""
Orbit - Orbital layout and priority-belt engine

Assigns and maintains the angle and radius of subtasks orbiting a parent
task, and tracks the priority belt that separates the prioritized inner
subtasks from the rest.

Architecture:
    angles    (permanent angle per subtask)      radii (ring per active subtask)
        ↓                                          ↓
        └──────────────→ backfill ←──── belt (belt ring from targets)
                            ↓
                         system (one belt position per mutation)
                            ↓
                         writer (one writer per parent task)

All engine functions are pure: they take a collection and return a new one.
"""

from .angles import default_angle_for_index, next_angle, stable_animation_delay
from .backfill import backfill
from .belt import belt_position, create_belt, current_belt_ring, move_belt
from .config import DEFAULT_CONFIG, OrbitConfig
from .errors import (
    BeltNotEnabledError,
    DuplicateSubtaskError,
    OrbitError,
    SubtaskNotFoundError
)
from .radii import (
    default_marker_ring,
    marker_radius,
    next_radius,
    radius_for_active_position,
    radius_to_ring,
    recalculate_all_radii
)
from .schemas import (
    BeltDirection,
    BeltPosition,
    BeltStatus,
    ParentTask,
    Subtask,
    ValidationResult
)
from .system import (
    LayoutResult,
    add_subtask,
    delete_subtask,
    enable_belt,
    initialize_orbits,
    layout,
    remove_belt,
    set_completed,
    shift_belt
)
from .validation import log_validation_results, validate_orbital_invariants
from .writer import ParentTaskWriter

__all__ = [
    # Angles
    "next_angle",
    "default_angle_for_index",
    "stable_animation_delay",

    # Radii
    "radius_for_active_position",
    "recalculate_all_radii",
    "next_radius",
    "marker_radius",
    "radius_to_ring",
    "default_marker_ring",

    # Belt
    "belt_position",
    "current_belt_ring",
    "create_belt",
    "move_belt",

    # Migration
    "backfill",

    # Parent-task operations
    "LayoutResult",
    "layout",
    "add_subtask",
    "set_completed",
    "delete_subtask",
    "enable_belt",
    "shift_belt",
    "remove_belt",
    "initialize_orbits",
    "ParentTaskWriter",

    # Validation
    "validate_orbital_invariants",
    "log_validation_results",

    # Models
    "Subtask",
    "ParentTask",
    "BeltStatus",
    "BeltDirection",
    "BeltPosition",
    "ValidationResult",

    # Config / errors
    "OrbitConfig",
    "DEFAULT_CONFIG",
    "OrbitError",
    "SubtaskNotFoundError",
    "DuplicateSubtaskError",
    "BeltNotEnabledError"
]

__version__ = "1.0.0"
