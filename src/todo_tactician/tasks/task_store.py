# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from ..errors import ValidationError
from .task_models import (
    DEFAULT_PRIORITY,
    TITLE_MAX,
    Task,
    is_valid_date,
    is_valid_priority,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateResult:
    """Outcome of an interactive edit: which fields changed and which were refused."""

    task_id: int
    found: bool
    applied: list[str] = field(default_factory=list)
    rejected: dict[str, str] = field(default_factory=dict)


class TaskStore:
    """
    In-memory task collection owned by one session.

    - ids are unique and allocated as max(existing) + 1, never recycled
    - delete is swap-remove: O(1), but the order of the remaining tasks changes
    - readers that need an order (list view, queries) work on a snapshot
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._items: list[Task] = []
        for task in tasks or []:
            self.append(task)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    # ---- low-level helpers ----

    def append(self, task: Task) -> None:
        """Add an already-built task (loader path). Ids must stay distinct."""
        if self.find(task.id) is not None:
            raise ValidationError("id", f"duplicate task id {task.id}")
        self._items.append(task)

    def next_id(self) -> int:
        return max((t.id for t in self._items), default=0) + 1

    def find(self, task_id: int) -> int | None:
        """Return the index of the task with `task_id`, or None."""
        for idx, task in enumerate(self._items):
            if task.id == task_id:
                return idx
        return None

    def get(self, task_id: int) -> Task | None:
        idx = self.find(task_id)
        return None if idx is None else self._items[idx]

    def snapshot(self) -> list[Task]:
        """Copies of the current records; mutating them never touches the store."""
        return [replace(t) for t in self._items]

    # ---- public API ----

    def add(self, title: str, due: str = "", priority: int | None = None) -> Task:
        if not title:
            raise ValidationError("title", "title is required")
        if not is_valid_date(due):
            raise ValidationError("due", f"invalid date {due!r}, use YYYY-MM-DD or empty")
        if priority is None:
            priority = DEFAULT_PRIORITY
        if not is_valid_priority(priority):
            raise ValidationError("priority", f"priority {priority} is outside 1..5")

        task = Task(
            id=self.next_id(),
            title=title[:TITLE_MAX],
            due=due,
            priority=priority,
            done=False,
        )
        self._items.append(task)
        logger.debug("Task added id=%s priority=%s due=%r", task.id, task.priority, task.due)
        return task

    def update(
        self,
        task_id: int,
        *,
        title: str | None = None,
        due: str | None = None,
        priority: int | None = None,
        done: bool | None = None,
    ) -> UpdateResult:
        """
        Overwrite the supplied fields that validate on their own.

        A refused field keeps its old value and is reported in `rejected`;
        the other fields are still applied.
        """
        result = UpdateResult(task_id=task_id, found=False)
        task = self.get(task_id)
        if task is None:
            return result
        result.found = True

        if title is not None:
            if title:
                task.title = title[:TITLE_MAX]
                result.applied.append("title")
            else:
                result.rejected["title"] = "Ignored empty title."

        if due is not None:
            if is_valid_date(due):
                task.due = due
                result.applied.append("due")
            else:
                result.rejected["due"] = "Ignored invalid date."

        if priority is not None:
            if is_valid_priority(priority):
                task.priority = priority
                result.applied.append("priority")
            else:
                result.rejected["priority"] = "Ignored invalid priority."

        if done is not None:
            task.done = bool(done)
            result.applied.append("done")

        logger.debug(
            "Task updated id=%s applied=%s rejected=%s",
            task_id,
            result.applied,
            sorted(result.rejected),
        )
        return result

    def delete(self, task_id: int) -> bool:
        """Swap-remove the task; an unknown id is a no-op."""
        idx = self.find(task_id)
        if idx is None:
            return False
        last = self._items.pop()
        if idx < len(self._items):
            self._items[idx] = last
        logger.debug("Task deleted id=%s", task_id)
        return True
