# tests/test_task_models.py

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from task_tracker.tasks.task_models import Priority, Task


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", Priority.LOW),
        ("2", Priority.MEDIUM),
        ("3", Priority.HIGH),
        ("high", Priority.HIGH),
        ("  Medium ", Priority.MEDIUM),
        ("LOW", Priority.LOW),
    ],
)
def test_priority_parse_accepts_digits_and_names(raw: str, expected: Priority) -> None:
    assert Priority.parse(raw) is expected


@pytest.mark.parametrize("raw", ["", "4", "urgent", "0"])
def test_priority_parse_rejects_unknown(raw: str) -> None:
    with pytest.raises(ValueError):
        Priority.parse(raw)


def test_priority_equality_is_by_variant() -> None:
    assert Priority.from_record("High") == Priority.HIGH
    assert Priority.HIGH != Priority.MEDIUM


def test_task_record_uses_plain_field_names() -> None:
    task = Task(
        id=7,
        description="Buy milk",
        category="Errands",
        priority=Priority.MEDIUM,
        created_at="2025-01-01 09:00:00",
    )
    assert task.to_record() == {
        "id": 7,
        "description": "Buy milk",
        "completed": False,
        "category": "Errands",
        "priority": "Medium",
        "due_date": None,
        "created_at": "2025-01-01 09:00:00",
        "completed_at": None,
    }
    assert Task.from_record(task.to_record()) == task


@pytest.mark.parametrize(
    "bad",
    [
        {"description": "x", "priority": "Low", "created_at": "t"},  # no id
        {"id": -1, "description": "x", "priority": "Low", "created_at": "t"},
        {"id": True, "description": "x", "priority": "Low", "created_at": "t"},
        {"id": 1, "description": "x", "priority": "Urgent", "created_at": "t"},
        {"id": 1, "description": 5, "priority": "Low", "created_at": "t"},
        {"id": 1, "description": "x", "priority": "Low", "created_at": "t", "completed": "yes"},
        {"id": 1, "description": "x", "priority": "Low", "created_at": "t", "completed": True, "completed_at": None},
        {"id": 1, "description": "x", "priority": "Low", "created_at": "t", "completed": False, "completed_at": "t"},
    ],
)
def test_task_from_record_rejects_malformed(bad: dict) -> None:
    with pytest.raises((KeyError, TypeError, ValueError)):
        Task.from_record(bad)


def test_task_is_immutable() -> None:
    task = Task(id=1, description="a", category="c", priority=Priority.LOW, created_at="t")
    with pytest.raises(FrozenInstanceError):
        task.completed = True  # type: ignore[misc]
