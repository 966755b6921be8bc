# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app, passed explicitly to the components.
- Nothing is read from disk except the local .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TRACKER"

CORRUPT_BACKUP = "backup"
CORRUPT_ABORT = "abort"
_CORRUPT_POLICIES = (CORRUPT_BACKUP, CORRUPT_ABORT)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    profile_path: Path

    # ---- Startup policy ----
    on_corrupt_store: str  # "backup" or "abort"

    @staticmethod
    def from_env() -> Settings:
        load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "task-tracker").strip() or "task-tracker"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_tracker"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        profile_path = _env_path(_k("PROFILE_PATH"), data_dir / "profile.json")

        on_corrupt_store = _env_choice(_k("ON_CORRUPT_STORE"), _CORRUPT_POLICIES, CORRUPT_BACKUP)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            profile_path=profile_path,
            on_corrupt_store=on_corrupt_store,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
