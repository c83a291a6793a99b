# src/todo_tactician/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings kept on the state for easy access from command handlers.
    settings: object

    tasks_path: Path
    store: TaskStore

    # Set by the quit command; the console loop stops once it is True.
    finished: bool = False
