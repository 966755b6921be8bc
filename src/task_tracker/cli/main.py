# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
menu loop in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import StoreCorrupt, StoreError

logger = logging.getLogger(__name__)

EXIT_STORE_ERROR = 2


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    try:
        setup_logging(log_dir=settings.data_dir, console_level=console_level)
    except OSError as e:
        print(f"Cannot set up logging in {settings.data_dir}: {e}", file=sys.stderr)
        print("Set TRACKER_DATA_DIR to a writable directory.", file=sys.stderr)
        return EXIT_STORE_ERROR

    logger.info("Starting %s (tasks file %s)...", settings.app_name, settings.tasks_path)

    try:
        state = create_initial_state(settings=settings)
    except StoreError as e:
        logger.error("Cannot start: %s", e)
        print(f"Cannot open data file {e.path}: {e.reason}", file=sys.stderr)
        if isinstance(e, StoreCorrupt):
            print(
                "Fix or remove the file, or set TRACKER_ON_CORRUPT_STORE=backup to start fresh.",
                file=sys.stderr,
            )
        return EXIT_STORE_ERROR

    if state.profile is not None:
        print(f"Hello, {state.profile.name}!")

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
