# tests/test_cli.py

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from todo_tactician.cli.bootstrap import create_initial_state
from todo_tactician.cli.main import main
from todo_tactician.cli.selftest import run_self_test
from todo_tactician.config import Settings
from todo_tactician.errors import ValidationError
from todo_tactician.storage.document import load_tasks

GOOD = '[\n  { "id": 1, "title": "Write docs", "due": "2025-08-26", "priority": 5, "done": false }\n]\n'
BAD = '[{"id": 1, "title": "ok"}, {"id": 2, "title": "bad", "due": "2025-13-01"}]'


def test_self_test_passes(isolated_env: Path) -> None:
    result = CliRunner().invoke(main, ["--test"])
    assert result.exit_code == 0
    assert "round-trip OK (2 items)" in result.output


def test_run_self_test_uses_temporary_directory(tmp_path: Path) -> None:
    assert run_self_test(work_dir=tmp_path) is True
    assert list(tmp_path.iterdir()) == []


def test_malformed_file_exits_1(isolated_env: Path) -> None:
    path = isolated_env / "tasks.json"
    path.write_text(BAD, "utf-8")
    result = CliRunner().invoke(main, [str(path)], input="6\n")
    assert result.exit_code == 1
    assert "[Start]" not in result.output
    # the broken file is left untouched
    assert path.read_text("utf-8") == BAD


def test_missing_file_starts_empty_and_quit_saves(isolated_env: Path) -> None:
    path = isolated_env / "new.json"
    result = CliRunner().invoke(main, [str(path)], input="6\n")
    assert result.exit_code == 0
    assert "[Start] Loaded 0 tasks" in result.output
    assert "Saved. Bye." in result.output
    assert path.read_text("utf-8") == "[\n]\n"


def test_default_path_comes_from_settings(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = isolated_env / "from-env.json"
    target.write_text(GOOD, "utf-8")
    monkeypatch.setenv("TODO_TASKS_PATH", str(target))

    result = CliRunner().invoke(main, [], input="1\nSecond\n\n4\n6\n")
    assert result.exit_code == 0
    assert "Loaded 1 tasks" in result.output
    assert "Added id 2." in result.output
    assert [t.priority for t in load_tasks(target)] == [5, 4]


def test_end_of_input_exits_0_without_saving(isolated_env: Path) -> None:
    path = isolated_env / "tasks.json"
    path.write_text(GOOD, "utf-8")
    result = CliRunner().invoke(main, [str(path)], input="4\n1\n")
    assert result.exit_code == 0
    assert "Deleted." in result.output
    assert "[End]" in result.output
    assert path.read_text("utf-8") == GOOD


def test_create_initial_state_propagates_load_failure(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(BAD, "utf-8")
    settings = Settings(tasks_path=path, log_level="WARNING", data_dir=tmp_path, log_to_file=False)
    with pytest.raises(ValidationError):
        create_initial_state(settings=settings)


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, isolated_env: Path) -> None:
    monkeypatch.setenv("TODO_TASKS_PATH", "~/todo/tasks.json")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.tasks_path == Path("~/todo/tasks.json").expanduser()
    assert settings.log_level == "DEBUG"
    assert settings.log_to_file is False
    assert settings.data_dir == Path(".local/todo")


def test_directory_path_starts_empty_and_reports_save_failure(isolated_env: Path) -> None:
    folder = isolated_env / "folder"
    folder.mkdir()
    result = CliRunner().invoke(main, [str(folder)], input="6\n")
    assert result.exit_code == 0
    assert "[Start] Loaded 0 tasks" in result.output
    assert "Save failed. Bye." in result.output
    assert folder.is_dir()
    assert not (isolated_env / "folder.tmp").exists()
