# tests/test_task_models.py

from __future__ import annotations

import json

import pytest

from task_tracker.tasks.task_models import MAX_TASK_ID, Task


def test_task_creation() -> None:
    task = Task.new(1, "Buy milk")
    assert task.id == 1
    assert task.description == "Buy milk"
    assert task.completed is False


def test_mark_completed_is_idempotent() -> None:
    task = Task.new(2, "Do laundry")
    task.mark_completed()
    task.mark_completed()
    assert task.completed is True


def test_display() -> None:
    task = Task.new(3, "Read book")
    assert task.display() == "[ ] Read book"

    task.mark_completed()
    assert task.display() == "[x] Read book"


def test_from_dict_ignores_extra_keys() -> None:
    task = Task.from_dict({"id": 4, "description": "Walk", "completed": True, "extra": 1})
    assert task == Task(id=4, description="Walk", completed=True)


@pytest.mark.parametrize(
    "raw",
    [
        [],
        {"id": 1, "description": "x"},
        {"id": True, "description": "x", "completed": False},
        {"id": -1, "description": "x", "completed": False},
        {"id": MAX_TASK_ID + 1, "description": "x", "completed": False},
        {"id": 1.0, "description": "x", "completed": False},
        {"id": 1, "description": None, "completed": False},
        {"id": 1, "description": "x", "completed": 0},
    ],
)
def test_from_dict_rejects_bad_shapes(raw) -> None:
    with pytest.raises(ValueError):
        Task.from_dict(raw)


def test_from_dict_rejects_lone_surrogate_description() -> None:
    raw = json.loads('{"id": 0, "description": "\\ud800", "completed": false}')
    with pytest.raises(ValueError):
        Task.from_dict(raw)
