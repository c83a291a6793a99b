# tests/test_writer.py

from __future__ import annotations

from pathlib import Path

from todo_tactician.storage.writer import escape_string, render_document, save_tasks
from todo_tactician.tasks.task_models import Task


def test_render_document_exact_shape() -> None:
    tasks = [
        Task(id=1, title="Write docs", due="2025-08-26", priority=5, done=False),
        Task(id=2, title="Refactor", due="", priority=2, done=True),
    ]
    assert render_document(tasks) == (
        "[\n"
        '  { "id": 1, "title": "Write docs", "due": "2025-08-26", "priority": 5, "done": false },\n'
        '  { "id": 2, "title": "Refactor", "due": "", "priority": 2, "done": true }\n'
        "]\n"
    )


def test_render_empty_document() -> None:
    assert render_document([]) == "[\n]\n"


def test_render_keeps_iteration_order() -> None:
    tasks = [Task(id=9, title="z"), Task(id=1, title="a")]
    text = render_document(tasks)
    assert text.index('"id": 9') < text.index('"id": 1')


def test_escape_string() -> None:
    assert escape_string('a"b\\c') == '"a\\"b\\\\c"'
    assert escape_string("x\ny\rz\tw") == '"x\\ny\\rz\\tw"'
    assert escape_string("\x01\x1f") == '"\\u0001\\u001f"'
    assert escape_string("/ é") == '"/ é"'


def test_save_tasks_writes_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    assert save_tasks(path, [Task(id=1, title="Café")]) is True
    assert "Café" in path.read_text("utf-8")
    assert not (tmp_path / "tasks.json.tmp").exists()


def test_save_tasks_reports_failure(tmp_path: Path) -> None:
    path = tmp_path / "missing-dir" / "tasks.json"
    assert save_tasks(path, [Task(id=1, title="a")]) is False
    assert not path.exists()


def test_save_tasks_reports_unencodable_title(tmp_path: Path) -> None:
    # lone surrogate, e.g. from a terminal with a broken locale
    path = tmp_path / "tasks.json"
    assert save_tasks(path, [Task(id=1, title="a\udcff")]) is False
    assert not path.exists()
    assert not (tmp_path / "tasks.json.tmp").exists()
