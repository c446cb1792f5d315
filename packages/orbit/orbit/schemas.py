from __future__ import annotations

from enum import Enum
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BeltStatus(str, Enum):
    """Where the priority belt currently is."""
    NONE = "none"                # No belt, or every target id is gone
    CELEBRATING = "celebrating"  # All remaining targets completed (ring 0)
    RING = "ring"                # Sitting on an orbital ring (>= 2)


class BeltDirection(str, Enum):
    """Manual belt reposition direction."""
    INWARD = "inward"
    OUTWARD = "outward"


class Subtask(BaseModel):
    """A child item orbiting its parent task.

    ``assigned_angle`` is written once at creation; ``assigned_radius`` is
    recomputed for active items and frozen once the item completes.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    completed: bool = False
    parent_task_id: Optional[str] = None
    assigned_angle: Optional[float] = None
    assigned_radius: Optional[float] = None


class ParentTask(BaseModel):
    """A parent task with its subtask collection and belt state."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    subtasks: List[Subtask] = Field(default_factory=list)
    belt_enabled: bool = False
    belt_ring: Optional[int] = Field(None, ge=0)
    belt_target_ids: Optional[FrozenSet[str]] = None


class BeltPosition(BaseModel):
    """Belt status plus its ring; ``ring`` is 0 unless status is RING."""
    model_config = ConfigDict(frozen=True)

    status: BeltStatus
    ring: int = 0

    @property
    def is_visible(self) -> bool:
        return self.status is not BeltStatus.NONE


class ValidationResult(BaseModel):
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

