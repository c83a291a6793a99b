# src/todo_tactician/cli/main.py

"""
CLI entrypoint.

    todo-tactician [PATH]    interactive menu over PATH (default: tasks.json)
    todo-tactician --test    save/reload self-test, exit 0 on success

Exit code 1 when the initial load fails (malformed existing file).
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import TodoError
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state
from .selftest import run_self_test

logger = logging.getLogger(__name__)


@click.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("--test", "self_test", is_flag=True, help="Run the save/load round-trip self-test.")
@click.pass_context
def main(ctx: click.Context, path: Path | None, self_test: bool) -> None:
    """Keep a todo list in a small JSON file."""
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    if self_test:
        ctx.exit(0 if run_self_test() else 1)

    try:
        state = create_initial_state(settings=settings, tasks_path=path)
    except TodoError as e:
        target = path if path is not None else settings.tasks_path
        logger.error("Failed to load %s: %s", target, e)
        click.echo(f"Failed to load {target}: {e}", err=True)
        ctx.exit(1)

    print(f"[Start] Loaded {len(state.store)} tasks from {state.tasks_path}")
    run_console_loop(state)
    print("[End]")


if __name__ == "__main__":
    main()
