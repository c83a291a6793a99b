# src/todo_tactician/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the storage and query code.

The query layer depends on this Protocol instead of the concrete TaskStore,
which keeps it usable with plain test doubles. The writer only needs an
iterable of tasks.
"""

from collections.abc import Iterator
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[Task]: ...

    # Query layer reads copies only
    def snapshot(self) -> list[Task]: ...
