# src/todo_tactician/cli/bootstrap.py

"""
CLI bootstrap helpers.

Composition root: resolves the document path, loads the store and wires both
into an AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..core.state import AppState
from ..storage.document import load_tasks

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings: Settings | None = None,
    tasks_path: str | Path | None = None,
) -> AppState:
    """
    Load the task document and build the session state.

    ParseError / ValidationError from the loader propagate: a malformed
    existing file must not turn into a half-filled session.
    """
    if settings is None:
        settings = get_settings()

    path = Path(tasks_path) if tasks_path is not None else settings.tasks_path
    store = load_tasks(path)
    return AppState(settings=settings, tasks_path=path, store=store)
