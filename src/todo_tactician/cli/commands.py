# src/todo_tactician/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..storage.writer import save_tasks
from ..tasks.task_models import is_valid_date
from ..tasks.task_query import SortOrder, TaskFilter, query_tasks
from .formatting import render_table
from .prompts import Ask, parse_int, read_date, read_int_range, read_line

CommandHandler = Callable[[AppState, Ask], str]

logger = logging.getLogger(__name__)

ID_MAX = 100_000_000


class CommandRegistry:
    """Menu registry used by the console loop (1..6 or add/list/...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, ask: Ask = input) -> str:
        """Run the command chosen by `line` and return the text to show."""
        name = line.strip().lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Choose 1-{len(self._help)}."
        return handler(state, ask)

    def build_menu(self) -> str:
        items = " ".join(f"{key}){help_text}" for key, help_text in self._help.items())
        return f"[Menu] {items}"


registry = CommandRegistry()


def cmd_add(state: AppState, ask: Ask) -> str:
    title = read_line(ask, "Title: ")
    while not title:
        print("Title required.")
        title = read_line(ask, "Title: ")
    due = read_date(ask, "Due (YYYY-MM-DD or empty): ", allow_empty=True)
    priority = read_int_range(ask, "Priority [1-5] (default 3): ", 1, 5, allow_empty=True)

    task = state.store.add(title, due, priority)
    logger.info("Added task id=%s", task.id)
    return f"Added id {task.id}."


def cmd_list(state: AppState, ask: Ask) -> str:
    if len(state.store) == 0:
        return "No tasks."

    choice = read_line(ask, "Sort by: 1) due  2) priority  [1]: ").strip()
    order = SortOrder.PRIORITY if choice.startswith("2") else SortOrder.DUE

    due_before = read_line(ask, "Filter due before (YYYY-MM-DD) or empty: ").strip()
    if due_before and not is_valid_date(due_before):
        print("Ignored invalid date filter.")
        due_before = ""

    min_priority = parse_int(read_line(ask, "Min priority [1-5] or 0 for none: "))
    if min_priority is not None and not 1 <= min_priority <= 5:
        min_priority = None

    pending_only = read_line(ask, "Only pending? 1=yes 0=no [0]: ").strip().startswith("1")

    flt = TaskFilter(
        due_before=due_before or None,
        min_priority=min_priority,
        pending_only=pending_only,
    )
    return render_table(query_tasks(state.store, order, flt))


def cmd_update(state: AppState, ask: Ask) -> str:
    if len(state.store) == 0:
        return "No tasks."
    task_id = read_int_range(ask, "ID to update: ", 1, ID_MAX)
    task = state.store.get(task_id) if task_id is not None else None
    if task is None:
        return "Not found."

    title = read_line(ask, f"Title [{task.title}]: ")
    due = read_line(ask, f"Due [{task.due}]: ").strip()
    priority_raw = read_line(ask, f"Priority [{task.priority}]: ").strip()
    done_raw = read_line(ask, f"Mark done? 1=yes 0=no [{int(task.done)}]: ").strip()

    done: bool | None = None
    if done_raw.startswith("1"):
        done = True
    elif done_raw.startswith("0"):
        done = False

    priority: int | None = None
    if priority_raw:
        # Non-numeric input becomes 0, which the store refuses for this field only.
        priority = parse_int(priority_raw) or 0

    result = state.store.update(
        task.id,
        title=title or None,
        due=due or None,
        priority=priority,
        done=done,
    )
    lines = list(result.rejected.values())
    lines.append("Updated.")
    return "\n".join(lines)


def cmd_delete(state: AppState, ask: Ask) -> str:
    if len(state.store) == 0:
        return "No tasks."
    task_id = read_int_range(ask, "ID to delete: ", 1, ID_MAX)
    if task_id is None or not state.store.delete(task_id):
        return "Not found."
    return "Deleted."


def cmd_save(state: AppState, ask: Ask) -> str:
    return "Saved." if save_tasks(state.tasks_path, state.store) else "Save failed."


def cmd_quit(state: AppState, ask: Ask) -> str:
    state.finished = True
    if save_tasks(state.tasks_path, state.store):
        return "Saved. Bye."
    return "Save failed. Bye."


registry.register("1", cmd_add, "add", aliases=["add"])
registry.register("2", cmd_list, "list", aliases=["list"])
registry.register("3", cmd_update, "update", aliases=["update"])
registry.register("4", cmd_delete, "delete", aliases=["delete"])
registry.register("5", cmd_save, "save", aliases=["save"])
registry.register("6", cmd_quit, "quit", aliases=["quit", "exit"])
