# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

TITLE_MAX = 128
DATE_LEN = 10

PRIORITY_MIN = 1
PRIORITY_MAX = 5
DEFAULT_PRIORITY = 3

YEAR_MIN = 1900
YEAR_MAX = 2100

# Sort key of an unset due date: after every real date.
NO_DUE_KEY = 99991231

_MONTH_DAYS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(slots=True)
class Task:
    id: int
    title: str
    due: str = ""  # "" or YYYY-MM-DD
    priority: int = DEFAULT_PRIORITY
    done: bool = False


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_date(text: str) -> bool:
    """
    Check a due date.

    Accepts the empty string (no due date) or YYYY-MM-DD with a real
    Gregorian day and a year between 1900 and 2100.
    """
    if not text:
        return True
    if len(text) != DATE_LEN or text[4] != "-" or text[7] != "-":
        return False
    digits = text[0:4] + text[5:7] + text[8:10]
    if not all("0" <= ch <= "9" for ch in digits):
        return False

    year, month, day = int(text[0:4]), int(text[5:7]), int(text[8:10])
    if year < YEAR_MIN or year > YEAR_MAX:
        return False
    if month < 1 or month > 12:
        return False
    last = 29 if month == 2 and is_leap(year) else _MONTH_DAYS[month]
    return 1 <= day <= last


def date_key(text: str) -> int:
    """Encode a (valid) due date as YYYYMMDD; the empty date sorts last."""
    if not text:
        return NO_DUE_KEY
    return int(text[0:4] + text[5:7] + text[8:10])


def is_valid_priority(value: int) -> bool:
    return PRIORITY_MIN <= value <= PRIORITY_MAX
