# src/todo_tactician/cli/selftest.py

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..errors import TodoError
from ..storage.document import load_tasks
from ..storage.writer import save_tasks
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _sample_store() -> TaskStore:
    return TaskStore(
        [
            Task(id=1, title='Write "docs" \\ core', due="2025-08-26", priority=5, done=False),
            Task(id=2, title="Refactor", due="", priority=2, done=True),
        ]
    )


def run_self_test(work_dir: str | Path | None = None) -> bool:
    """
    Save a small store to a temporary file, load it back and compare.

    Returns True on an exact round-trip (same records, same order).
    """
    expected = _sample_store()

    with tempfile.TemporaryDirectory(dir=work_dir) as tmp:
        path = Path(tmp) / "tasks_test.json"
        if not save_tasks(path, expected):
            print("Test: save FAILED")
            return False
        try:
            loaded = load_tasks(path)
        except TodoError:
            logger.exception("Self-test reload failed")
            print("Test: round-trip FAILED")
            return False

    ok = list(loaded) == list(expected)
    if ok:
        print(f"Test: round-trip OK ({len(expected)} items)")
    else:
        print("Test: round-trip FAILED")
    return ok
