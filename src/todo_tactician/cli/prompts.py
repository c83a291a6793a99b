# src/todo_tactician/cli/prompts.py

"""
Line-based prompt helpers.

All helpers take an `ask` callable (defaults to `input`) so handlers can be
driven from tests. EOFError from `ask` is not caught here.
"""

from __future__ import annotations

from collections.abc import Callable

from ..tasks.task_models import is_valid_date

Ask = Callable[[str], str]


def read_line(ask: Ask, prompt: str) -> str:
    line = ask(prompt)
    return line.rstrip("\r\n")


def parse_int(text: str) -> int | None:
    text = text.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def read_int_range(
    ask: Ask,
    prompt: str,
    lo: int,
    hi: int,
    *,
    allow_empty: bool = False,
) -> int | None:
    """Re-prompt until an integer in [lo, hi] is entered (or empty, if allowed)."""
    while True:
        line = read_line(ask, prompt)
        if allow_empty and line == "":
            return None
        value = parse_int(line)
        if value is not None and lo <= value <= hi:
            return value
        print(f"Invalid. Enter {lo}..{hi}.")


def read_date(ask: Ask, prompt: str, *, allow_empty: bool = True) -> str:
    while True:
        line = read_line(ask, prompt).strip()
        if allow_empty and line == "":
            return ""
        if line and is_valid_date(line):
            return line
        print("Invalid date. Use YYYY-MM-DD or empty.")
