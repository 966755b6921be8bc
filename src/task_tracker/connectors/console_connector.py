# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import Prompt
from ..core.state import AppState

logger = logging.getLogger(__name__)


def console_prompt(question: str) -> str:
    return input(question).strip()


def run_console_loop(
    state: AppState,
    *,
    ask: Prompt = console_prompt,
    registry: CommandRegistry | None = None,
) -> None:
    """
    Show the menu, read a choice, run it, print the reply; repeat until the
    exit entry, EOF or Ctrl+C. A failing command never ends the loop.
    """
    registry = registry or command_registry
    logger.info("Console loop started (tasks=%d).", len(state.task_store))

    while not state.exit_requested:
        print("\n" + registry.build_menu())
        try:
            choice = ask("\nEnter your choice: ")
            reply = registry.handle(state, choice, ask)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed.")
            print("Internal error while handling the command. See the log file for details.")
            continue

        if reply is not None:
            print(reply)

    logger.info("Console loop finished.")
