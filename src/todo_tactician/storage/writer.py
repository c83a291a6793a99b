# src/todo_tactician/storage/writer.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

# Inverse of the escapes the decoder understands.
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_string(text: str) -> str:
    out = ['"']
    for ch in text:
        esc = _ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif ord(ch) < 0x20:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _render_task(t: Task) -> str:
    return (
        "  { "
        f'"id": {t.id}, '
        f'"title": {escape_string(t.title)}, '
        f'"due": {escape_string(t.due)}, '
        f'"priority": {t.priority}, '
        f'"done": {"true" if t.done else "false"} '
        "}"
    )


def render_document(tasks: Iterable[Task]) -> str:
    """Render tasks in iteration order (no sorting), one object per line."""
    rows = [_render_task(t) for t in tasks]
    body = ",\n".join(rows)
    return "[\n" + (body + "\n" if rows else "") + "]\n"


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> bool:
    """
    Write the document atomically (tmp file + replace).

    Returns False if the destination cannot be written; the error is logged.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        text = render_document(tasks)
        with open(tmp, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp, path)
    except (OSError, UnicodeError):
        # UnicodeError: a title holding a lone surrogate cannot be written as UTF-8.
        logger.exception("Failed to save tasks to %s", path)
        with contextlib.suppress(OSError):
            tmp.unlink()
        return False

    logger.info("Saved tasks to %s", path)
    return True
