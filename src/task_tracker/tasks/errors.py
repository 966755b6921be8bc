# src/task_tracker/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TrackerError(Exception):
    """Base class for recoverable task tracker errors."""


class TaskNotFound(TrackerError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


class InvalidInput(TrackerError):
    """User-supplied text could not be parsed (raised before the store is touched)."""


class StoreError(TrackerError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class StoreCorrupt(StoreError):
    """The backing file exists but does not hold a valid document."""


class StoreUnavailable(StoreError):
    """The backing file could not be written."""
