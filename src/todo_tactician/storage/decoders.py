# src/todo_tactician/storage/decoders.py

"""
Value decoders for the task document format.

Every decoder skips leading whitespace, consumes exactly one value and raises
ParseError (with the cursor offset) when the input does not match.

Supported subset:
- strings with the escapes \\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX,
- 32-bit signed integers (no fractions, no exponents),
- true / false / null,
- arrays and objects (only ever decoded to be skipped).

\\uXXXX is accepted syntactically, but the code point is not decoded: the four
characters are consumed and a single placeholder is produced instead. Files
written by earlier versions rely on this behaviour.
"""

from __future__ import annotations

from typing import Any

from ..errors import ParseError
from .cursor import Cursor

UNICODE_PLACEHOLDER = "?"
INT_MAX = 2147483647
MAX_DEPTH = 64

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def decode_string(cur: Cursor, capacity: int | None = None) -> str:
    """
    Decode a double-quoted string.

    If `capacity` is given, the decoded text is cut to that many characters;
    the rest of the string is still consumed.
    """
    cur.skip_whitespace()
    start = cur.offset
    if cur.get() != '"':
        raise ParseError("expected string", start)

    out: list[str] = []
    while not cur.at_end():
        ch = cur.get()
        if ch == '"':
            text = "".join(out)
            return text if capacity is None else text[:capacity]
        if ch == "\\":
            if cur.at_end():
                break
            esc = cur.get()
            if esc == "u":
                if cur.length - cur.offset < 4:
                    break
                for _ in range(4):
                    cur.get()
                ch = UNICODE_PLACEHOLDER
            elif esc in _SIMPLE_ESCAPES:
                ch = _SIMPLE_ESCAPES[esc]
            else:
                raise ParseError(f"unknown escape \\{esc}", cur.offset - 1)
        out.append(ch)

    raise ParseError("unterminated string", start)


def decode_int(cur: Cursor) -> int:
    cur.skip_whitespace()
    start = cur.offset
    sign = 1
    if cur.peek() == "-":
        sign = -1
        cur.get()
    if not _is_digit(cur.peek()):
        raise ParseError("expected integer", start)

    value = 0
    while _is_digit(cur.peek()):
        value = value * 10 + (ord(cur.get()) - ord("0"))
        if value > INT_MAX:
            raise ParseError("integer out of range", start)
    return sign * value


def decode_bool(cur: Cursor) -> bool:
    cur.skip_whitespace()
    start = cur.offset
    if cur.match_literal("true"):
        return True
    if cur.match_literal("false"):
        return False
    raise ParseError("expected true or false", start)


def decode_value(cur: Cursor, depth: int = 0) -> Any:
    """Decode any supported value into str / int / bool / None / list / dict."""
    if depth > MAX_DEPTH:
        raise ParseError("value nested too deeply", cur.offset)

    cur.skip_whitespace()
    ch = cur.peek()
    if ch == '"':
        return decode_string(cur)
    if ch == "{":
        return _decode_object(cur, depth)
    if ch == "[":
        return _decode_array(cur, depth)
    if ch in ("t", "f"):
        return decode_bool(cur)
    if ch == "n":
        if cur.match_literal("null"):
            return None
        raise ParseError("expected null", cur.offset)
    if ch == "-" or _is_digit(ch):
        return decode_int(cur)
    raise ParseError("unexpected character" if ch != "\0" else "unexpected end of input", cur.offset)


def skip_value(cur: Cursor) -> None:
    """Consume one value of any supported kind (used for unrecognized keys)."""
    decode_value(cur)


def _decode_array(cur: Cursor, depth: int) -> list[Any]:
    cur.expect("[")
    items: list[Any] = []
    if cur.expect("]"):
        return items
    while True:
        items.append(decode_value(cur, depth + 1))
        if cur.expect(","):
            continue
        if cur.expect("]"):
            return items
        raise ParseError("expected ',' or ']' in array", cur.offset)


def _decode_object(cur: Cursor, depth: int) -> dict[str, Any]:
    cur.expect("{")
    obj: dict[str, Any] = {}
    if cur.expect("}"):
        return obj
    while True:
        key = decode_string(cur)
        if not cur.expect(":"):
            raise ParseError("expected ':' after key", cur.offset)
        obj[key] = decode_value(cur, depth + 1)
        if cur.expect(","):
            continue
        if cur.expect("}"):
            return obj
        raise ParseError("expected ',' or '}' in object", cur.offset)
