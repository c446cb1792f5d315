"""
Tests for parent-task operations

Validates:
- Angle permanence across arbitrary mutations
- Radius freezing on completion
- Belt threading through completions, additions, deletions and moves
- Error codes for bad ids and missing belts
"""

import pytest

from orbit import (
    BeltDirection,
    BeltNotEnabledError,
    BeltStatus,
    DuplicateSubtaskError,
    ParentTask,
    Subtask,
    SubtaskNotFoundError,
    add_subtask,
    delete_subtask,
    enable_belt,
    initialize_orbits,
    layout,
    remove_belt,
    set_completed,
    shift_belt
)


def _radii(task):
    return {st.id: st.assigned_radius for st in task.subtasks}


def _with_xyz(parent):
    task = parent
    for subtask_id in ("x", "y", "z"):
        task = add_subtask(task, subtask_id, subtask_id.upper()).task
    return task


# ==================== Adding ====================

def test_add_subtask_assigns_gap_angles_and_rings(parent):
    """Test add subtask assigns gap angles and rings."""
    task = _with_xyz(parent)

    assert [st.assigned_angle for st in task.subtasks] == [-90, 90, 180]
    assert [st.assigned_radius for st in task.subtasks] == [115, 155, 195]
    assert all(st.parent_task_id == "task-1" for st in task.subtasks)


def test_add_subtask_rejects_duplicate_id(parent):
    """Test add subtask rejects duplicate id."""
    task = add_subtask(parent, "x").task

    with pytest.raises(DuplicateSubtaskError) as exc_info:
        add_subtask(task, "x")
    assert exc_info.value.code == "DuplicateSubtask"
    assert exc_info.value.subtask_id == "x"


def test_add_subtask_does_not_mutate_input(parent):
    """Test add subtask does not mutate input."""
    task = add_subtask(parent, "x").task
    add_subtask(task, "y")

    assert parent.subtasks == []
    assert [st.id for st in task.subtasks] == ["x"]


# ==================== Invariants Under Mutation ====================

def test_angles_never_change_after_creation(parent):
    """Test angles never change after creation."""
    task = _with_xyz(parent)
    angles = {st.id: st.assigned_angle for st in task.subtasks}

    task = set_completed(task, "x", True).task
    task = add_subtask(task, "w").task
    task = enable_belt(task).task
    task = delete_subtask(task, "y").task
    task = shift_belt(task, BeltDirection.INWARD).task
    task = set_completed(task, "x", False).task
    task = remove_belt(task).task

    for st in task.subtasks:
        if st.id in angles:
            assert st.assigned_angle == angles[st.id]


def test_completed_radius_is_frozen(parent):
    """Test completed radius is frozen."""
    task = _with_xyz(parent)

    task = set_completed(task, "y", True).task
    frozen = _radii(task)["y"]
    assert frozen == 155
    # z closes ranks
    assert _radii(task)["z"] == 155

    task = add_subtask(task, "w").task
    task = set_completed(task, "x", True).task
    assert _radii(task)["y"] == frozen


def test_uncomplete_then_recomplete_reproduces_radius(parent):
    """Test uncomplete then recomplete reproduces radius."""
    task = _with_xyz(parent)

    first = set_completed(task, "y", True).task
    again = set_completed(set_completed(first, "y", False).task, "y", True).task

    assert _radii(again)["y"] == _radii(first)["y"]
    assert again == first


def test_unknown_subtask_raises(parent):
    """Test unknown subtask raises."""
    task = _with_xyz(parent)

    with pytest.raises(SubtaskNotFoundError) as exc_info:
        set_completed(task, "nope", True)
    assert exc_info.value.code == "SubtaskNotFound"

    with pytest.raises(SubtaskNotFoundError):
        delete_subtask(task, "nope")


# ==================== Belt Threading ====================

def test_enable_belt_wraps_all_active(parent):
    """Test enable belt wraps all active."""
    result = enable_belt(_with_xyz(parent))

    assert result.belt.status is BeltStatus.RING
    assert result.belt.ring == 4
    assert result.task.belt_enabled is True
    assert result.task.belt_target_ids == frozenset({"x", "y", "z"})
    assert [st.assigned_radius for st in result.task.subtasks] == [115, 155, 195]


def test_belt_follows_completions_and_pushes_outsiders(parent):
    """Test belt follows completions and pushes outsiders."""
    task = enable_belt(_with_xyz(parent)).task

    result = set_completed(task, "x", True)
    assert result.belt.ring == 3
    assert _radii(result.task) == {"x": 115, "y": 115, "z": 155}

    # w was never a target: it lands outside the belt
    result = add_subtask(result.task, "w")
    assert result.belt.ring == 3
    assert _radii(result.task)["w"] == 275

    result = set_completed(result.task, "y", True)
    assert result.belt.ring == 2
    assert _radii(result.task)["z"] == 115
    assert _radii(result.task)["w"] == 235

    result = set_completed(result.task, "z", True)
    assert result.belt.status is BeltStatus.CELEBRATING
    assert result.belt.ring == 0
    # No belt spacing while celebrating
    assert _radii(result.task)["w"] == 115


def test_deleting_every_target_makes_belt_vanish(parent):
    """Test deleting every target makes belt vanish."""
    task = enable_belt(_with_xyz(parent)).task
    task = add_subtask(task, "w").task

    for subtask_id in ("x", "y", "z"):
        result = delete_subtask(task, subtask_id)
        task = result.task

    assert result.belt.status is BeltStatus.NONE
    assert _radii(task) == {"w": 115}


def test_shift_belt_moves_from_current_ring(parent):
    """Test shift belt moves from current ring."""
    task = enable_belt(_with_xyz(parent)).task

    result = shift_belt(task, BeltDirection.INWARD)
    assert result.belt.ring == 3
    assert result.task.belt_ring == 3
    assert result.task.belt_target_ids == frozenset({"x", "y"})
    assert [st.assigned_radius for st in result.task.subtasks] == [115, 155, 275]

    result = shift_belt(result.task, "outward")
    assert result.belt.ring == 4
    assert result.task.belt_target_ids == frozenset({"x", "y", "z"})


def test_shift_belt_requires_belt(parent):
    """Test shift belt requires belt."""
    with pytest.raises(BeltNotEnabledError) as exc_info:
        shift_belt(_with_xyz(parent), "inward")
    assert exc_info.value.code == "BeltNotEnabled"


def test_remove_belt_clears_fields_and_spacing(parent):
    """Test remove belt clears fields and spacing."""
    task = shift_belt(enable_belt(_with_xyz(parent)).task, "inward").task
    result = remove_belt(task)

    assert result.belt.status is BeltStatus.NONE
    assert result.task.belt_enabled is False
    assert result.task.belt_ring is None
    assert result.task.belt_target_ids is None
    assert [st.assigned_radius for st in result.task.subtasks] == [115, 155, 195]


def test_disabled_belt_fields_are_ignored(parent):
    """Test disabled belt fields are ignored."""
    task = _with_xyz(parent).model_copy(update={
        "belt_ring": 2,
        "belt_target_ids": frozenset({"x"}),
    })
    result = layout(task)

    assert result.belt.status is BeltStatus.NONE
    assert [st.assigned_radius for st in result.task.subtasks] == [115, 155, 195]


# ==================== Legacy Data ====================

def test_initialize_orbits_fills_legacy_task():
    """Test initialize orbits fills legacy task."""
    task = ParentTask(
        id="legacy",
        subtasks=[Subtask(id="a"), Subtask(id="b", completed=True), Subtask(id="c")],
    )
    result = initialize_orbits(task)

    assert [st.assigned_angle for st in result.task.subtasks] == [-90, 30, 150]
    assert [st.assigned_radius for st in result.task.subtasks] == [115, None, 155]
    assert initialize_orbits(result.task).task == result.task
