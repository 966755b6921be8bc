# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the task and profile files and applies the corrupt-file policy,
- wires concrete implementations into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..config import CORRUPT_ABORT, get_settings
from ..core.state import AppState
from ..profile.profile_store import JsonProfileStore, UserProfile
from ..tasks.errors import StoreCorrupt, StoreUnavailable
from ..tasks.task_storage import JsonTaskStorage, TaskSnapshot
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def _ensure_local_dirs(settings) -> None:
    for path in (settings.data_dir, settings.tasks_path.parent, settings.profile_path.parent):
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreUnavailable(path, f"cannot create directory ({e})") from e


def backup_corrupt_file(path: Path, *, now: datetime | None = None) -> Path:
    """Move a corrupt file aside as <name>.corrupt-<timestamp> and return the new path."""
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    target = path.with_name(f"{path.name}.corrupt-{stamp}")
    try:
        path.replace(target)
    except OSError as e:
        raise StoreUnavailable(path, f"cannot move corrupt file aside ({e})") from e
    return target


def _load_tasks(storage: JsonTaskStorage, policy: str, notify: Notifier) -> TaskSnapshot:
    try:
        return storage.load()
    except StoreCorrupt as e:
        if policy == CORRUPT_ABORT:
            raise
        backup = backup_corrupt_file(e.path)
        logger.warning("Task file is corrupt (%s); moved to %s, starting empty.", e.reason, backup)
        notify(f"Task file was unreadable and has been moved to {backup}. Starting with an empty list.")
        return TaskSnapshot()


def _load_profile(store: JsonProfileStore, policy: str, notify: Notifier) -> UserProfile | None:
    try:
        return store.load()
    except StoreCorrupt as e:
        if policy == CORRUPT_ABORT:
            raise
        backup = backup_corrupt_file(e.path)
        logger.warning("Profile file is corrupt (%s); moved to %s.", e.reason, backup)
        notify(f"Profile file was unreadable and has been moved to {backup}.")
        return None


def create_initial_state(*, settings=None, notify: Notifier = print) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StoreCorrupt when a data file is unreadable and the policy is "abort".
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)
    policy = getattr(settings, "on_corrupt_store", "backup")

    task_storage = JsonTaskStorage(settings.tasks_path)
    snapshot = _load_tasks(task_storage, policy, notify)

    profile_store = JsonProfileStore(settings.profile_path)
    profile = _load_profile(profile_store, policy, notify)

    return AppState(
        settings=settings,
        task_store=TaskStore(task_storage, snapshot=snapshot),
        profile_store=profile_store,
        profile=profile,
    )
