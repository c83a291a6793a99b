# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tactician.core.state import AppState
from todo_tactician.tasks.task_models import Task
from todo_tactician.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI helpers.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        tasks_path=tmp_path / "tasks.json",
        log_level="WARNING",
        data_dir=tmp_path / "logs",
        log_to_file=False,
    )


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(id=1, title="Write docs", due="2025-08-26", priority=5, done=False),
        Task(id=2, title="Refactor", due="", priority=2, done=True),
        Task(id=3, title="Pay rent", due="2025-08-01", priority=4, done=False),
        Task(id=4, title="Call mom", due="2025-08-26", priority=5, done=True),
    ]


@pytest.fixture()
def state(settings: SimpleNamespace, sample_tasks: list[Task]) -> AppState:
    return AppState(
        settings=settings,
        tasks_path=settings.tasks_path,
        store=TaskStore(sample_tasks),
    )


@pytest.fixture()
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run CLI code from an empty directory with file logging off."""
    monkeypatch.chdir(tmp_path)
    for name in ("TODO_TASKS_PATH", "TODO_LOG_LEVEL", "TODO_DATA_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TODO_LOG_TO_FILE", "false")
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield tmp_path
    # Drop the handlers setup_logging attached (their streams belong to CliRunner).
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
