# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Prompt
from ..core.state import AppState
from ..profile.profile_store import UserProfile
from ..tasks.errors import InvalidInput, StoreUnavailable, TrackerError
from ..tasks.task_models import Priority, Task
from ..tasks.task_stats import statistics
from .input_parsing import parse_age, parse_due_date, parse_priority, parse_task_id

CommandHandler = Callable[[AppState, Prompt], str]

PRIORITY_ATTEMPTS = 3

logger = logging.getLogger(__name__)


def friendly_error_message(e: TrackerError) -> str:
    if isinstance(e, StoreUnavailable):
        return f"Could not save changes ({e.reason}). The change was not applied."
    return str(e)


class CommandRegistry:
    """Numbered menu registry used by the console loop (1 = add, 2 = list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._menu: list[tuple[str, str]] = []

    def register(
        self,
        key: str,
        handler: CommandHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[key.lower()] = handler
        self._menu.append((key, label))
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, ask: Prompt) -> str | None:
        """
        Run the menu entry named by `line` (its number or an alias).
        Returns the reply text, or None for an empty line.

        Recoverable errors become reply text; anything else propagates.
        """
        choice = line.strip().lower()
        if not choice:
            return None

        handler = self._handlers.get(choice)
        if not handler:
            return f"Invalid choice: {line.strip()!r}. Enter a number from the menu."

        try:
            return handler(state, ask)
        except TrackerError as e:
            logger.info("Command %s failed: %s", choice, e)
            return friendly_error_message(e)

    def build_menu(self) -> str:
        lines = ["=== TASK TRACKER ==="]
        for key, label in self._menu:
            lines.append(f"{key}. {label}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    line = f"[{mark}] #{task.id} {task.description or '<no description>'}"
    details = [task.category or "uncategorized", task.priority.value]
    line += f" ({', '.join(details)})"
    if task.due_date:
        line += f" due {task.due_date}"
    if task.completed_at:
        line += f" done {task.completed_at}"
    return line


def _ask_priority(ask: Prompt, *, allow_blank: bool = False) -> Priority | None:
    """
    Ask for a priority. Re-prompts on bad input; after PRIORITY_ATTEMPTS tries
    the answer is Medium (or None, meaning "keep", when blank is allowed).
    """
    question = "Priority (1=Low, 2=Medium, 3=High)"
    question += ", blank to keep: " if allow_blank else ": "
    for _ in range(PRIORITY_ATTEMPTS):
        raw = ask(question)
        if allow_blank and not raw:
            return None
        try:
            return parse_priority(raw)
        except InvalidInput:
            logger.debug("Rejected priority input %r", raw)
    return None if allow_blank else Priority.MEDIUM


def cmd_add(state: AppState, ask: Prompt) -> str:
    description = ask("Description: ")
    if not description:
        raise InvalidInput("Description cannot be empty. Task not added.")
    category = ask("Category: ")
    priority = _ask_priority(ask) or Priority.MEDIUM
    due_raw = ask("Due date (YYYY-MM-DD HH:MM, blank for none): ")
    due_date = parse_due_date(due_raw)

    task = state.task_store.create(description, category, priority, due_date)

    reply = f"Task #{task.id} added."
    if due_raw and due_date is None:
        reply += " Due date not recognized; saved without a due date."
    return reply


def cmd_list(state: AppState, ask: Prompt) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks yet!"
    return "\n".join(["Your tasks:", *(format_task(t) for t in tasks)])


def cmd_complete(state: AppState, ask: Prompt) -> str:
    task_id = parse_task_id(ask("Task id to complete: "))
    task = state.task_store.get(task_id)
    if task.completed:
        return f"Task #{task_id} was already completed at {task.completed_at}."
    state.task_store.complete(task_id)
    return f"Task #{task_id} marked as completed."


def cmd_update(state: AppState, ask: Prompt) -> str:
    task_id = parse_task_id(ask("Task id to update: "))
    current = state.task_store.get(task_id)

    description = ask(f"Description [{current.description}], blank to keep: ")
    category = ask(f"Category [{current.category}], blank to keep: ")
    priority = _ask_priority(ask, allow_blank=True)
    due_raw = ask(f"Due date [{current.due_date or 'none'}] (YYYY-MM-DD HH:MM), blank to keep: ")
    due_date = parse_due_date(due_raw)

    state.task_store.update(
        task_id,
        description=description or None,
        category=category or None,
        priority=priority,
        due_date=due_date,
    )

    reply = f"Task #{task_id} updated."
    if due_raw and due_date is None:
        reply += " Due date not recognized; kept the previous one."
    return reply


def cmd_delete(state: AppState, ask: Prompt) -> str:
    task_id = parse_task_id(ask("Task id to delete: "))
    state.task_store.delete(task_id)
    return f"Task #{task_id} deleted."


def cmd_filter(state: AppState, ask: Prompt) -> str:
    category = ask("Category: ")
    matches = [format_task(t) for t in state.task_store.filter_by_category(category)]
    if not matches:
        return f"No tasks in category {category!r}."
    return "\n".join([f"Tasks in {category!r}:", *matches])


def cmd_stats(state: AppState, ask: Prompt) -> str:
    stats = statistics(state.task_store.list_tasks())
    lines = []
    if state.profile is not None:
        lines.append(f"Statistics for {state.profile.name} (member since {state.profile.joined_on}):")
    else:
        lines.append("Statistics:")
    lines += [
        f"  Total tasks: {stats.total}",
        f"  Completed: {stats.completed}",
        f"  Pending: {stats.pending}",
        f"  High priority pending: {stats.high_priority_pending}",
        f"  Completion rate: {stats.completion_rate:.0%}",
    ]
    return "\n".join(lines)


def cmd_profile(state: AppState, ask: Prompt) -> str:
    """
    Show the profile and optionally edit it.
    The join date is set on first save and never changes.
    """
    current = state.profile
    if current is None:
        name = ask("What's your name? (blank to skip): ")
        if not name:
            return "No profile saved."
        age = parse_age(ask("What's your age? (blank to skip): "))
        profile = UserProfile.new(name, age)
    else:
        age_text = "unknown" if current.age is None else str(current.age)
        name = ask(f"Name [{current.name}], blank to keep: ")
        age_raw = ask(f"Age [{age_text}], blank to keep: ")
        age = parse_age(age_raw) if age_raw else current.age
        profile = UserProfile(name=name or current.name, age=age, joined_on=current.joined_on)

    state.profile_store.save(profile)
    state.profile = profile
    age_text = "unknown" if profile.age is None else str(profile.age)
    return f"Profile saved: {profile.name}, age {age_text}, joined {profile.joined_on}."


def cmd_exit(state: AppState, ask: Prompt) -> str:
    state.exit_requested = True
    return "Goodbye!"


registry.register("1", cmd_add, "Add task", aliases=["add"])
registry.register("2", cmd_list, "Show all tasks", aliases=["list", "ls"])
registry.register("3", cmd_complete, "Complete task", aliases=["done", "complete"])
registry.register("4", cmd_update, "Update task", aliases=["update", "edit"])
registry.register("5", cmd_delete, "Delete task", aliases=["delete", "rm"])
registry.register("6", cmd_filter, "Filter by category", aliases=["filter"])
registry.register("7", cmd_stats, "Statistics", aliases=["stats"])
registry.register("8", cmd_profile, "Profile", aliases=["profile"])
registry.register("9", cmd_exit, "Exit", aliases=["exit", "quit"])
