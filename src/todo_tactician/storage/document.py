# src/todo_tactician/storage/document.py

"""
Task document parser.

Document shape:
    [ { "id": 1, "title": "...", "due": "YYYY-MM-DD", "priority": 3, "done": false }, ... ]

Loading is all-or-nothing: one malformed or invalid record fails the whole
document and no store is returned. Unknown keys are skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ParseError, ValidationError
from ..tasks.task_models import (
    DATE_LEN,
    DEFAULT_PRIORITY,
    TITLE_MAX,
    Task,
    is_valid_date,
    is_valid_priority,
)
from ..tasks.task_store import TaskStore
from .cursor import Cursor
from .decoders import decode_bool, decode_int, decode_string, skip_value

logger = logging.getLogger(__name__)

KEY_MAX = 31


def _parse_record(cur: Cursor) -> Task:
    start = cur.offset
    if not cur.expect("{"):
        raise ParseError("expected '{' to start a task", cur.offset)

    task = Task(id=0, title="", due="", priority=0, done=False)
    while True:
        key = decode_string(cur, KEY_MAX)
        if not cur.expect(":"):
            raise ParseError(f"expected ':' after key {key!r}", cur.offset)

        if key == "id":
            task.id = decode_int(cur)
        elif key == "title":
            task.title = decode_string(cur, TITLE_MAX)
        elif key == "due":
            task.due = decode_string(cur, DATE_LEN)
        elif key == "priority":
            task.priority = decode_int(cur)
        elif key == "done":
            task.done = decode_bool(cur)
        else:
            logger.debug("Skipping unknown key %r at offset %s", key, cur.offset)
            skip_value(cur)

        if cur.expect(","):
            continue
        if cur.expect("}"):
            break
        raise ParseError("expected ',' or '}' after value", cur.offset)

    if task.priority == 0:
        task.priority = DEFAULT_PRIORITY
    if not is_valid_date(task.due):
        raise ValidationError("due", f"invalid date {task.due!r} in task starting at offset {start}")
    if not is_valid_priority(task.priority):
        raise ValidationError(
            "priority", f"priority {task.priority} outside 1..5 in task starting at offset {start}"
        )
    return task


def parse_document(text: str) -> TaskStore:
    """Decode a whole document into a new TaskStore (raises on any error)."""
    cur = Cursor(text)
    store = TaskStore()

    if not cur.expect("["):
        raise ParseError("document must start with '['", cur.offset)

    if not cur.expect("]"):
        while True:
            store.append(_parse_record(cur))
            if cur.expect(","):
                continue
            if cur.expect("]"):
                break
            raise ParseError("expected ',' or ']' after task", cur.offset)

    cur.skip_whitespace()
    if not cur.at_end():
        raise ParseError("unexpected content after ']'", cur.offset)
    return store


def load_tasks(path: str | Path) -> TaskStore:
    """
    Load a task document.

    - missing / unreadable file -> empty store (first run)
    - ParseError / ValidationError propagate; the caller gets no partial store
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.info("No task file at %s, starting empty.", path)
        return TaskStore()
    except OSError:
        logger.warning("Cannot open task file %s, starting empty.", path, exc_info=True)
        return TaskStore()

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8", e.start) from e

    store = parse_document(text)
    logger.info("Loaded %d tasks from %s", len(store), path)
    return store
