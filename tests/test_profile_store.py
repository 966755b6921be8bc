# tests/test_profile_store.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from task_tracker.profile.profile_store import JsonProfileStore, UserProfile
from task_tracker.tasks.errors import StoreCorrupt


def test_missing_profile_is_none(tmp_path: Path) -> None:
    assert JsonProfileStore(tmp_path / "profile.json").load() is None


def test_profile_round_trip(tmp_path: Path) -> None:
    store = JsonProfileStore(tmp_path / "p" / "profile.json")
    profile = UserProfile.new("  Ada ", 36, today=date(2025, 3, 1))
    store.save(profile)

    loaded = store.load()
    assert loaded == UserProfile(name="Ada", age=36, joined_on="2025-03-01")


@pytest.mark.parametrize(
    "content",
    ["nope", "[]", '{"name": "Ada"}', '{"name": "Ada", "joined_on": "2025-01-01", "age": "x"}'],
)
def test_bad_profile_is_corrupt(tmp_path: Path, content: str) -> None:
    path = tmp_path / "profile.json"
    path.write_text(content, "utf-8")
    with pytest.raises(StoreCorrupt):
        JsonProfileStore(path).load()
