# src/todo_tactician/cli/formatting.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task

TITLE_WIDTH = 30

RULE = "+------+--------------------------------+------------+----------+-------+"


def truncate(text: str, width: int = TITLE_WIDTH) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def format_row(t: Task) -> str:
    return (
        f"| {t.id:4d} | {truncate(t.title):<30} | {t.due:<10} "
        f"| {t.priority:8d} | {'yes' if t.done else 'no':>5} |"
    )


def render_table(tasks: Iterable[Task]) -> str:
    lines = [
        RULE,
        f"| {'ID':<4} | {'Title':<30} | {'Due':<10} | {'Priority':<8} | {'Done':<5} |",
        RULE,
    ]
    lines.extend(format_row(t) for t in tasks)
    lines.append(RULE)
    return "\n".join(lines)
