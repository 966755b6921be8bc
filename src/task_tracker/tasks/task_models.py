# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

DUE_DATE_FORMAT = "%Y-%m-%d %H:%M"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Priority(StrEnum):
    """
    Task priority.

    Order is for display only; tasks are never sorted by it.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Accept a name (any case) or the menu digit 1/2/3."""
        text = (raw or "").strip()
        by_digit = {"1": cls.LOW, "2": cls.MEDIUM, "3": cls.HIGH}
        if text in by_digit:
            return by_digit[text]
        for p in cls:
            if p.value.lower() == text.lower():
                return p
        raise ValueError(f"Unknown priority: {raw!r}")

    @classmethod
    def from_record(cls, raw: Any) -> Priority:
        if not isinstance(raw, str):
            raise ValueError(f"Priority must be a string, got {type(raw).__name__}")
        return cls(raw)


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    category: str
    priority: Priority
    created_at: str

    completed: bool = False
    due_date: str | None = None
    completed_at: str | None = None

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
            "category": self.category,
            "priority": self.priority.value,
            "due_date": self.due_date,
            "created_at": self.created_at,
            "completed_at": self.completed_at,
        }

    @classmethod
    def from_record(cls, raw: dict[str, Any]) -> Task:
        """
        Rebuild a task from its stored dict.

        Raises KeyError/TypeError/ValueError when the record does not have the
        expected shape; the storage layer turns those into StoreCorrupt.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"Task record must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 0:
            raise ValueError(f"Invalid task id: {task_id!r}")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"Invalid completed flag for task {task_id}: {completed!r}")

        completed_at = _optional_text(raw.get("completed_at"), "completed_at")
        if completed != (completed_at is not None):
            raise ValueError(f"Task {task_id}: completed_at must be set exactly when completed is true")

        return cls(
            id=task_id,
            description=_text(raw["description"], "description"),
            category=_text(raw.get("category", ""), "category"),
            priority=Priority.from_record(raw["priority"]),
            created_at=_text(raw["created_at"], "created_at"),
            completed=completed,
            due_date=_optional_text(raw.get("due_date"), "due_date"),
            completed_at=completed_at,
        )


def _text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _optional_text(value: Any, name: str) -> str | None:
    if value is None:
        return None
    return _text(value, name)
