# src/kask/tasks/validation.py

"""
Input contracts for task dates and times.

Two-digit years follow the century rule of datetime.strptime's %y
directive (69-99 -> 19xx, 00-68 -> 20xx). No windowing of our own is applied.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from ..errors import DateFormatError, LineBreakError, TimeFormatError
from .task_models import DATE_FORMAT, TIME_FORMAT

_DATE_RE = re.compile(r"^\d{2}/\d{2}/\d{2}$")
_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(am|pm)$")


def validate_date(text: str) -> None:
    if not _DATE_RE.match(text):
        raise DateFormatError(text)
    try:
        datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        raise DateFormatError(text) from None


def validate_time(text: str) -> None:
    if not _TIME_RE.match(text):
        raise TimeFormatError(text)
    try:
        datetime.strptime(text, TIME_FORMAT)
    except ValueError:
        raise TimeFormatError(text) from None


def validate_text(text: str, what: str) -> None:
    """Reject line breaks inside text; surrounding whitespace is trimmed later anyway."""
    inner = text.strip()
    if "\n" in inner or "\r" in inner:
        raise LineBreakError(text, what)


def parse_date(text: str) -> date:
    """Parse a stored date. Lenient about padding, unlike validate_date."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise DateFormatError(text) from None


def parse_time(text: str) -> int:
    """Return minutes since midnight for a stored hh:mm[am|pm] time."""
    try:
        t = datetime.strptime(text.strip(), TIME_FORMAT).time()
    except ValueError:
        raise TimeFormatError(text) from None
    return t.hour * 60 + t.minute
