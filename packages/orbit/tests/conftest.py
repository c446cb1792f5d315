"""Shared fixtures for orbit tests."""

import pytest

from orbit import ParentTask, Subtask


def _make_subtasks(*ids, completed=()):
    return [Subtask(id=i, title=i.upper(), completed=i in completed) for i in ids]


@pytest.fixture
def make_subtasks():
    """Factory for bare subtasks (no orbit fields) in the given stored order."""
    return _make_subtasks


@pytest.fixture
def xyz():
    """Three active subtasks X, Y, Z with no orbit fields yet."""
    return _make_subtasks("x", "y", "z")


@pytest.fixture
def parent():
    """Empty parent task."""
    return ParentTask(id="task-1", title="Write report")
