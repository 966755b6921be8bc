# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store and the shell depend on Protocols instead of concrete
implementations, so tests can swap in in-memory or failing storages.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..profile.profile_store import UserProfile
    from ..tasks.task_models import Task
    from ..tasks.task_storage import TaskSnapshot


class TaskStorage(Protocol):
    """Whole-collection persistence: load everything, save everything."""

    def load(self) -> TaskSnapshot: ...
    def save(self, tasks: Sequence[Task], next_id: int) -> None: ...


class ProfileStorage(Protocol):
    def load(self) -> UserProfile | None: ...
    def save(self, profile: UserProfile) -> None: ...


class Prompt(Protocol):
    """Ask the user one question and return the trimmed answer."""

    def __call__(self, question: str) -> str: ...
