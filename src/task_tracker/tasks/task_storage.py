# src/task_tracker/tasks/task_storage.py

"""
JSON file persistence for the task collection.

The whole collection is written on every save (no incremental updates):

    {"version": 1, "next_id": 4, "tasks": [{...}, {...}]}

A bare list of task records (the unversioned layout) is accepted on load.

Load policy:
- missing or empty file -> empty collection
- anything else that does not parse -> StoreCorrupt (the caller decides)
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import StoreCorrupt, StoreUnavailable
from .task_models import Task

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


@dataclass(slots=True)
class TaskSnapshot:
    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1


class JsonTaskStorage:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskSnapshot:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return TaskSnapshot()

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreCorrupt(self._path, f"cannot read file ({e})") from e

        if not raw.strip():
            logger.info("Task file %s is empty, starting empty.", self._path)
            return TaskSnapshot()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreCorrupt(self._path, f"invalid JSON ({e})") from e

        snapshot = self._parse_document(data)
        logger.info("Loaded %d tasks from %s (next_id=%d)", len(snapshot.tasks), self._path, snapshot.next_id)
        return snapshot

    def _parse_document(self, data: Any) -> TaskSnapshot:
        stored_next_id = 1
        if isinstance(data, list):
            records = data
        elif isinstance(data, dict):
            records = data.get("tasks")
            if not isinstance(records, list):
                raise StoreCorrupt(self._path, "'tasks' must be a list")
            raw_next = data.get("next_id", 1)
            if not isinstance(raw_next, int) or isinstance(raw_next, bool):
                raise StoreCorrupt(self._path, f"invalid next_id {raw_next!r}")
            stored_next_id = raw_next
        else:
            raise StoreCorrupt(self._path, f"unexpected top-level {type(data).__name__}")

        tasks: list[Task] = []
        seen: set[int] = set()
        for i, rec in enumerate(records):
            try:
                task = Task.from_record(rec)
            except (KeyError, TypeError, ValueError) as e:
                raise StoreCorrupt(self._path, f"bad task record #{i} ({e!r})") from e
            if task.id in seen:
                raise StoreCorrupt(self._path, f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)

        highest = max(seen, default=0)
        return TaskSnapshot(tasks=tasks, next_id=max(stored_next_id, highest + 1, 1))

    def save(self, tasks: Sequence[Task], next_id: int) -> None:
        doc = {
            "version": FORMAT_VERSION,
            "next_id": next_id,
            "tasks": [t.to_record() for t in tasks],
        }
        write_json_atomic(self._path, doc)
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)


def write_json_atomic(path: Path, doc: Any) -> None:
    """Write to a sibling temp file, then os.replace() it over the target."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(doc, ensure_ascii=False, indent=2) + "\n", "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp, exc_info=True)
        raise StoreUnavailable(path, str(e)) from e
