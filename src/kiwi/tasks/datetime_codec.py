# src/kiwi/tasks/datetime_codec.py

"""
Date/time codec.

Input forms:
- full:      "YYYY-MM-DD HHMM"  (e.g. "2026-02-15 2359")
- time-only: "HHMM"             (date supplied by the caller)

Output forms:
- display:   "MMM D YYYY HHMM"  (e.g. "Feb 4 2026 1800")
- storage:   "YYYY-MM-DD HHMM"

All values are naive local datetimes with minute precision.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from ..core.errors import DateTimeFormatError

_FULL_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2})([0-9]{2})")
_TIME_RE = re.compile(r"([0-9]{2})([0-9]{2})")

# English abbreviations regardless of the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

FORMAT_HINT = "Use: yyyy-MM-dd HHmm (e.g., 2026-02-15 2359)\nOr:  HHmm (e.g., 2359)"


def _invalid(token: str) -> DateTimeFormatError:
    return DateTimeFormatError(f"Invalid date/time: {token}\n{FORMAT_HINT}")


def _build(token: str, year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    if hour > 23 or minute > 59:
        raise _invalid(token)
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError as e:
        # month/day out of range, Feb 29 on a common year, year 0000, ...
        raise _invalid(token) from e


def parse_full_datetime(token: str) -> datetime:
    """Parse the full "YYYY-MM-DD HHMM" form only. Raises DateTimeFormatError."""
    m = _FULL_RE.fullmatch(token)
    if not m:
        raise _invalid(token)
    y, mo, d, hh, mm = (int(g) for g in m.groups())
    return _build(token, y, mo, d, hh, mm)


def parse_datetime(token: str, default_date: date) -> datetime:
    """
    Parse a full or time-only token.

    `default_date` is used for the time-only form. Raises DateTimeFormatError.
    """
    if _FULL_RE.fullmatch(token):
        return parse_full_datetime(token)

    m = _TIME_RE.fullmatch(token)
    if m:
        hh, mm = (int(g) for g in m.groups())
        return _build(token, default_date.year, default_date.month, default_date.day, hh, mm)

    raise _invalid(token)


def format_time(value: datetime) -> str:
    return f"{value.hour:02d}{value.minute:02d}"


def format_display_date(value: datetime | date) -> str:
    return f"{_MONTHS[value.month - 1]} {value.day} {value.year}"


def format_display(value: datetime) -> str:
    return f"{format_display_date(value)} {format_time(value)}"


def format_storage_date(value: datetime | date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_storage(value: datetime) -> str:
    return f"{format_storage_date(value)} {format_time(value)}"
