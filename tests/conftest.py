# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.profile.profile_store import JsonProfileStore
from task_tracker.tasks.task_storage import JsonTaskStorage
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        profile_path=data_dir / "profile.json",
        on_corrupt_store="backup",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage(settings: SimpleNamespace) -> JsonTaskStorage:
    return JsonTaskStorage(settings.tasks_path)


@pytest.fixture()
def store(storage: JsonTaskStorage, clock: FakeClock) -> TaskStore:
    """Real JSON-backed store in a tmp dir with a deterministic clock."""
    return TaskStore(storage, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(
        settings=settings,
        task_store=store,
        profile_store=JsonProfileStore(settings.profile_path),
    )
