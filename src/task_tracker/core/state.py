# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..profile.profile_store import UserProfile
from ..tasks.task_store import TaskStore
from .ports import ProfileStorage


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: object

    task_store: TaskStore
    profile_store: ProfileStorage
    profile: UserProfile | None = None

    # Set by the "exit" command; the console loop stops after the reply.
    exit_requested: bool = False
