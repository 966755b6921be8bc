# src/task_tracker/cli/input_parsing.py

"""Entry-time parsing of user text. Nothing here touches the task store."""

from __future__ import annotations

import logging
from datetime import datetime

from ..tasks.errors import InvalidInput
from ..tasks.task_models import DUE_DATE_FORMAT, Priority

logger = logging.getLogger(__name__)


def parse_task_id(text: str) -> int:
    raw = (text or "").strip().rstrip(".")
    if not raw.isdecimal():
        raise InvalidInput(f"Invalid task id: {text.strip()!r}. Enter a number like 3.")
    return int(raw)


def parse_priority(text: str) -> Priority:
    try:
        return Priority.parse(text)
    except ValueError as e:
        raise InvalidInput("Priority must be 1 (Low), 2 (Medium) or 3 (High).") from e


def parse_age(text: str) -> int | None:
    raw = (text or "").strip()
    if not raw:
        return None
    if not raw.isdecimal():
        raise InvalidInput(f"Invalid age: {raw!r}. Enter a whole number.")
    return int(raw)


def parse_due_date(text: str) -> str | None:
    """
    Return the due date normalized to YYYY-MM-DD HH:MM, or None.

    Blank input means "no due date". Input that does not match the format is
    downgraded to "no due date" as well (logged, not raised).
    """
    raw = (text or "").strip()
    if not raw:
        return None
    try:
        return datetime.strptime(raw, DUE_DATE_FORMAT).strftime(DUE_DATE_FORMAT)
    except ValueError:
        logger.info("Ignoring invalid due date %r", raw)
        return None
