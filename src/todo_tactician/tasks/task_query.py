# tasks/task_query.py

from __future__ import annotations

"""
Read-only views over the task store.

Sorting and filtering always run on a snapshot; the store itself is never
reordered or mutated here.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..core.ports import TaskRepo
from .task_models import Task, date_key


class SortOrder(str, Enum):
    DUE = "due"
    PRIORITY = "priority"


def _due_key(t: Task) -> tuple[int, int, int]:
    # due asc, priority desc, id asc
    return (date_key(t.due), -t.priority, t.id)


def _priority_key(t: Task) -> tuple[int, int, int]:
    # priority desc, due asc, id asc
    return (-t.priority, date_key(t.due), t.id)


_SORT_KEYS = {
    SortOrder.DUE: _due_key,
    SortOrder.PRIORITY: _priority_key,
}


@dataclass(slots=True, frozen=True)
class TaskFilter:
    """
    Filters combined with AND. Unset fields pass everything.

    due_before: keep tasks due strictly before this YYYY-MM-DD date
                (tasks without a due date never match)
    min_priority: keep tasks with priority >= this value
    pending_only: keep tasks that are not done
    """

    due_before: str | None = None
    min_priority: int | None = None
    pending_only: bool = False

    def matches(self, task: Task) -> bool:
        if self.due_before and date_key(task.due) >= date_key(self.due_before):
            return False
        if self.min_priority is not None and task.priority < self.min_priority:
            return False
        if self.pending_only and task.done:
            return False
        return True


def sort_tasks(tasks: Iterable[Task], order: SortOrder = SortOrder.DUE) -> list[Task]:
    return sorted(tasks, key=_SORT_KEYS[SortOrder(order)])


def filter_tasks(tasks: Iterable[Task], flt: TaskFilter | None = None) -> list[Task]:
    if flt is None:
        return list(tasks)
    return [t for t in tasks if flt.matches(t)]


def query_tasks(
    repo: TaskRepo,
    order: SortOrder = SortOrder.DUE,
    flt: TaskFilter | None = None,
) -> list[Task]:
    """Sorted, filtered copies of the store's tasks."""
    return filter_tasks(sort_tasks(repo.snapshot(), order), flt)
