# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace
from datetime import datetime

from ..core.ports import TaskStorage
from .errors import TaskNotFound
from .task_models import TIMESTAMP_FORMAT, Priority, Task
from .task_storage import TaskSnapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], str]


def _now_local() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class TaskStore:
    """
    In-memory ordered task collection backed by a TaskStorage.

    Ids come from a watermark that only moves forward (deleted ids are never
    reused, also across restarts since the watermark is saved with the tasks).

    Every mutation builds the new collection, saves it, and only then swaps it
    in. If saving raises StoreUnavailable, memory is left as it was.
    """

    def __init__(
        self,
        storage: TaskStorage,
        *,
        snapshot: TaskSnapshot | None = None,
        clock: Clock | None = None,
    ) -> None:
        """
        Load from `storage` unless an already loaded (or deliberately empty)
        snapshot is given. StoreCorrupt from the load propagates.
        """
        self._storage = storage
        self._clock: Clock = clock or _now_local
        self._tasks: list[Task] = []
        self._index: dict[int, Task] = {}
        self._next_id = 1
        self._replace_all(storage.load() if snapshot is None else snapshot)
        logger.info("TaskStore ready total=%d next_id=%d", len(self._tasks), self._next_id)

    # ---- low-level helpers ----

    def _replace_all(self, snapshot: TaskSnapshot) -> None:
        self._tasks = list(snapshot.tasks)
        self._index = {t.id: t for t in self._tasks}
        highest = max(self._index, default=0)
        self._next_id = max(snapshot.next_id, highest + 1, 1)

    def _commit(self, tasks: list[Task], next_id: int) -> None:
        self._storage.save(tasks, next_id)
        self._tasks = tasks
        self._index = {t.id: t for t in tasks}
        self._next_id = next_id

    def _require(self, task_id: int) -> Task:
        task = self._index.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    def _swap(self, old: Task, new: Task) -> list[Task]:
        return [new if t is old else t for t in self._tasks]

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    def list_tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task:
        return self._require(task_id)

    def create(
        self,
        description: str,
        category: str,
        priority: Priority,
        due_date: str | None = None,
    ) -> Task:
        task = Task(
            id=self._next_id,
            description=description.strip(),
            category=category.strip(),
            priority=priority,
            created_at=self._clock(),
            due_date=due_date,
        )
        self._commit([*self._tasks, task], self._next_id + 1)
        logger.info("Task created id=%d priority=%s due=%s", task.id, task.priority, task.due_date)
        return task

    def complete(self, task_id: int) -> Task:
        """
        Mark a task done. The first completion wins: calling this again on a
        completed task returns it unchanged and does not save.
        """
        task = self._require(task_id)
        if task.completed:
            logger.debug("Task %d already completed at %s", task_id, task.completed_at)
            return task

        done = replace(task, completed=True, completed_at=self._clock())
        self._commit(self._swap(task, done), self._next_id)
        logger.info("Task completed id=%d", task_id)
        return done

    def delete(self, task_id: int) -> Task:
        task = self._require(task_id)
        self._commit([t for t in self._tasks if t is not task], self._next_id)
        logger.info("Task deleted id=%d", task_id)
        return task

    def update(
        self,
        task_id: int,
        *,
        description: str | None = None,
        category: str | None = None,
        priority: Priority | None = None,
        due_date: str | None = None,
    ) -> Task:
        """
        Partial update: a field is replaced only when a new value is given.
        None or blank text leaves the current value alone.
        """
        task = self._require(task_id)

        changes: dict[str, object] = {}
        if description is not None and description.strip():
            changes["description"] = description.strip()
        if category is not None and category.strip():
            changes["category"] = category.strip()
        if priority is not None:
            changes["priority"] = priority
        if due_date is not None and due_date.strip():
            changes["due_date"] = due_date.strip()

        updated = replace(task, **changes)
        self._commit(self._swap(task, updated), self._next_id)
        logger.info("Task updated id=%d fields=%s", task_id, sorted(changes) or "-")
        return updated

    def filter_by_category(self, category: str) -> Iterator[Task]:
        wanted = category.strip().casefold()
        return (t for t in self._tasks if t.category.strip().casefold() == wanted)
