"""Parent-task layer errors; each carries a stable ``code`` for callers and UI."""

from __future__ import annotations


class OrbitError(ValueError):
    """Base error for orbit operations; error.code = OrbitError."""

    code: str = "OrbitError"

    def __init__(self, message: str = "") -> None:
        self.detail = message
        super().__init__(message or "Orbit error")


class SubtaskNotFoundError(OrbitError):
    """Subtask id not present on the parent task; error.code = SubtaskNotFound."""

    code: str = "SubtaskNotFound"

    def __init__(self, subtask_id: str, task_id: str = "") -> None:
        self.subtask_id = subtask_id
        self.task_id = task_id
        suffix = f" (task {task_id})" if task_id else ""
        super().__init__(f"Subtask not found: {subtask_id}{suffix}")


class DuplicateSubtaskError(OrbitError):
    """Subtask id already used on the parent task; error.code = DuplicateSubtask."""

    code: str = "DuplicateSubtask"

    def __init__(self, subtask_id: str, task_id: str = "") -> None:
        self.subtask_id = subtask_id
        self.task_id = task_id
        suffix = f" (task {task_id})" if task_id else ""
        super().__init__(f"Duplicate subtask id: {subtask_id}{suffix}")


class BeltNotEnabledError(OrbitError):
    """Belt operation on a task without a belt; error.code = BeltNotEnabled."""

    code: str = "BeltNotEnabled"

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Priority belt is not enabled on task {task_id}")
