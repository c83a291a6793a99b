# src/todo_tactician/storage/cursor.py

"""
Read-head over an in-memory document buffer.

The cursor only ever advances its offset; the buffer itself is never touched.
"""

from __future__ import annotations

END = "\0"

_WHITESPACE = frozenset(" \t\n\r\f\v")


class Cursor:
    def __init__(self, text: str) -> None:
        self._text = text
        self.offset = 0
        self.length = len(text)

    def at_end(self) -> bool:
        return self.offset >= self.length

    def peek(self) -> str:
        """Return the next character without consuming it ("\\0" at the end)."""
        if self.offset >= self.length:
            return END
        return self._text[self.offset]

    def get(self) -> str:
        """Consume and return the next character ("\\0" at the end)."""
        if self.offset >= self.length:
            return END
        ch = self._text[self.offset]
        self.offset += 1
        return ch

    def skip_whitespace(self) -> None:
        while self.offset < self.length and self._text[self.offset] in _WHITESPACE:
            self.offset += 1

    def expect(self, ch: str) -> bool:
        """Skip whitespace, then consume `ch` if it is next."""
        self.skip_whitespace()
        if self.peek() != ch:
            return False
        self.offset += 1
        return True

    def match_literal(self, literal: str) -> bool:
        """Skip whitespace, then consume `literal` if the upcoming text equals it."""
        self.skip_whitespace()
        end = self.offset + len(literal)
        if self._text[self.offset : end] != literal:
            return False
        self.offset = end
        return True
