# src/task_tracker/profile/profile_store.py

"""User profile (name, age, join date), kept in its own JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import date
from pathlib import Path

from ..tasks.errors import StoreCorrupt
from ..tasks.task_storage import write_json_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UserProfile:
    name: str
    age: int | None
    joined_on: str

    @classmethod
    def new(cls, name: str, age: int | None, today: date | None = None) -> UserProfile:
        return cls(name=name.strip(), age=age, joined_on=(today or date.today()).isoformat())


class JsonProfileStore:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> UserProfile | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StoreCorrupt(self._path, f"cannot read profile ({e})") from e

        if not isinstance(data, dict):
            raise StoreCorrupt(self._path, "profile must be an object")
        name = data.get("name")
        age = data.get("age")
        joined_on = data.get("joined_on")
        if not isinstance(name, str) or not isinstance(joined_on, str):
            raise StoreCorrupt(self._path, "profile needs string 'name' and 'joined_on'")
        if age is not None and (not isinstance(age, int) or isinstance(age, bool)):
            raise StoreCorrupt(self._path, f"invalid age {age!r}")
        return UserProfile(name=name, age=age, joined_on=joined_on)

    def save(self, profile: UserProfile) -> None:
        write_json_atomic(self._path, asdict(profile))
        logger.info("Saved profile to %s", self._path)
