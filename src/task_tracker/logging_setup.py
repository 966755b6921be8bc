# src/task_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task_tracker.log"

_FORMAT = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    stderr shares the terminal with the menu, so only our own loggers get
    through at the handler level; everything else (py.warnings included)
    needs ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "task_tracker" or name.startswith("task_tracker."):
            return True
        return record.levelno >= logging.ERROR


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_FORMAT)
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(_FORMAT)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/task_tracker",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route all logging to stderr (quiet, filtered) and to task_tracker.log in
    `log_dir` (everything down to DEBUG). Replaces any root handlers, so a
    second call does not double the output.

    Returns the log file path. Raises OSError when `log_dir` cannot be
    created or the log file cannot be opened.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    file_handler = _file_handler(log_file, file_level)

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.setLevel(logging.DEBUG)
    root.addHandler(_console_handler(console_level))
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
