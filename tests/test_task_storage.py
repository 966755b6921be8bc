# tests/test_task_storage.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from task_tracker.tasks.errors import StoreCorrupt, StoreUnavailable
from task_tracker.tasks.task_models import Priority, Task
from task_tracker.tasks.task_storage import JsonTaskStorage


def _task(task_id: int, **kw) -> Task:
    base = dict(
        id=task_id,
        description=f"task {task_id}",
        category="Work",
        priority=Priority.LOW,
        created_at="2025-01-01 09:00:00",
    )
    base.update(kw)
    return Task(**base)


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    snap = JsonTaskStorage(tmp_path / "nope" / "tasks.json").load()
    assert snap.tasks == []
    assert snap.next_id == 1


def test_blank_file_loads_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("  \n", "utf-8")
    assert JsonTaskStorage(path).load().tasks == []


def test_round_trip_keeps_ids_fields_and_order(tmp_path: Path) -> None:
    storage = JsonTaskStorage(tmp_path / "tasks.json")
    tasks = [
        _task(3, due_date="2025-01-01 10:00", priority=Priority.HIGH),
        _task(1),
        _task(2, completed=True, completed_at="2025-01-02 08:00:00", category=""),
    ]
    storage.save(tasks, next_id=9)

    snap = storage.load()
    assert snap.tasks == tasks
    assert snap.next_id == 9


def test_save_writes_versioned_document_without_leftovers(tmp_path: Path) -> None:
    path = tmp_path / "sub" / "tasks.json"
    JsonTaskStorage(path).save([_task(1)], next_id=2)

    doc = json.loads(path.read_text("utf-8"))
    assert doc["version"] == 1
    assert doc["next_id"] == 2
    assert doc["tasks"][0]["description"] == "task 1"
    assert [p.name for p in path.parent.iterdir()] == ["tasks.json"]


def test_watermark_never_below_highest_id(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"next_id": 2, "tasks": [_task(5).to_record()]}), "utf-8")
    assert JsonTaskStorage(path).load().next_id == 6


def test_bare_list_layout_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([_task(4).to_record(), _task(2).to_record()]), "utf-8")

    snap = JsonTaskStorage(path).load()
    assert [t.id for t in snap.tasks] == [4, 2]
    assert snap.next_id == 5


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '"just a string"',
        '{"tasks": {}}',
        '{"tasks": [], "next_id": "3"}',
        '[{"id": 1}]',
    ],
)
def test_unparseable_file_raises_store_corrupt(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")
    with pytest.raises(StoreCorrupt) as exc:
        JsonTaskStorage(path).load()
    assert exc.value.path == path


def test_duplicate_ids_are_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([_task(1).to_record(), _task(1).to_record()]), "utf-8")
    with pytest.raises(StoreCorrupt, match="duplicate"):
        JsonTaskStorage(path).load()


def test_unwritable_target_raises_store_unavailable(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", "utf-8")
    storage = JsonTaskStorage(blocker / "tasks.json")
    with pytest.raises(StoreUnavailable):
        storage.save([_task(1)], next_id=2)


def test_completed_without_timestamp_is_corrupt(tmp_path: Path) -> None:
    record = _task(1).to_record() | {"completed": True}
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([record]), "utf-8")
    with pytest.raises(StoreCorrupt, match="completed_at"):
        JsonTaskStorage(path).load()
