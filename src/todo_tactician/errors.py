# src/todo_tactician/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for task engine errors."""


class ParseError(TodoError):
    """The stored document violates the grammar (fatal for the whole load)."""

    def __init__(self, message: str, offset: int = -1) -> None:
        if offset >= 0:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class ValidationError(TodoError):
    """
    A field value is out of range or malformed.

    Fatal while loading a document, local to the field during interactive edits.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
