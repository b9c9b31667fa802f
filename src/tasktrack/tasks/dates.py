# src/tasktrack/tasks/dates.py

"""
Date/time codec.

Three textual forms of the same minute:
- entry form:   "yyyy-MM-dd HHmm" or bare "yyyy-MM-dd" (typed by the user)
- storage form: "yyyy-MM-dd HHmm" (always with a time)
- display form: "MMM dd yyyy, h:mma", e.g. "Dec 31 2024, 11:59PM"
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Final

from ..core.errors import DateFormatError

# Default time appended to a date-only entry.
DEADLINE_DEFAULT_TIME: Final = "2359"
EVENT_DEFAULT_TIME: Final = "0000"

DATE_FORMAT_MESSAGE: Final = (
    "Invalid date format. Please use yyyy-MM-dd or yyyy-MM-dd HHmm (e.g., 2019-12-02 1800)"
)

_FULL_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")
_FULL_FORMAT: Final = "%Y-%m-%d %H%M"

# Fixed English abbreviations: display must not depend on the process locale.
_MONTHS: Final = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _parse_full(text: str) -> datetime | None:
    if not _FULL_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, _FULL_FORMAT)
    except ValueError:
        return None


def parse_entry(text: str, default_time: str) -> datetime:
    """
    Parse user-entered date text.

    The full form is tried first. If it fails, `default_time` is appended and
    the full form is tried again, so a bare date picks up the default time.
    """
    parsed = _parse_full(text)
    if parsed is None:
        parsed = _parse_full(f"{text} {default_time}")
    if parsed is None:
        raise DateFormatError(DATE_FORMAT_MESSAGE)
    return parsed


def parse_storage(text: str) -> datetime:
    parsed = _parse_full(text)
    if parsed is None:
        raise DateFormatError(DATE_FORMAT_MESSAGE)
    return parsed


def to_storage(value: datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d} {value.hour:02d}{value.minute:02d}"


def to_display(value: datetime) -> str:
    hour12 = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    month = _MONTHS[value.month - 1]
    return f"{month} {value.day:02d} {value.year:04d}, {hour12}:{value.minute:02d}{suffix}"
