# src/task_tracker/tasks/task_stats.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .task_models import Priority, Task


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    high_priority_pending: int

    @property
    def completion_rate(self) -> float:
        return self.completed / self.total if self.total else 0.0


def statistics(tasks: Iterable[Task]) -> TaskStats:
    """Derive counts from a snapshot of the collection (read-only)."""
    total = completed = high_pending = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1
        elif t.priority == Priority.HIGH:
            high_pending += 1
    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        high_priority_pending=high_pending,
    )
