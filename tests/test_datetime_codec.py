# tests/test_datetime_codec.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from kiwi.core.errors import DateTimeFormatError
from kiwi.tasks.datetime_codec import (
    format_display,
    format_display_date,
    format_storage,
    format_time,
    parse_datetime,
    parse_full_datetime,
)

TODAY = date(2026, 2, 10)


def test_parse_full_form() -> None:
    assert parse_datetime("2026-02-15 2359", TODAY) == datetime(2026, 2, 15, 23, 59)


def test_parse_time_only_uses_default_date() -> None:
    assert parse_datetime("0930", TODAY) == datetime(2026, 2, 10, 9, 30)


@pytest.mark.parametrize(
    "token",
    [
        "2026/02/15 2359",  # wrong separator
        "2026-02-15T2359",
        "2026-02-15 23:59",
        "2026-02-15 2359 ",  # trailing whitespace inside the token
        "2026-2-15 2359",
        "11:30pm",
        "1130pm",
        "235959",  # seconds
        "930",
        "2400",
        "1260",
        "2026-13-01 1200",
        "2026-02-30 1200",
        "2025-02-29 1200",  # not a leap year
        "0000-01-01 0000",
        "abcd",
        "",
        "１２３４",  # non-ASCII digits
    ],
)
def test_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(DateTimeFormatError) as exc:
        parse_datetime(token, TODAY)
    assert "Invalid date/time" in str(exc.value)


def test_accepts_boundaries_and_leap_day() -> None:
    assert parse_datetime("0000", TODAY) == datetime(2026, 2, 10, 0, 0)
    assert parse_datetime("2359", TODAY) == datetime(2026, 2, 10, 23, 59)
    assert parse_datetime("2028-02-29 1200", TODAY) == datetime(2028, 2, 29, 12, 0)


def test_full_parser_rejects_time_only() -> None:
    with pytest.raises(DateTimeFormatError):
        parse_full_datetime("1200")


def test_display_forms() -> None:
    dt = datetime(2026, 2, 4, 18, 0)
    assert format_display(dt) == "Feb 4 2026 1800"
    assert format_display_date(dt) == "Feb 4 2026"
    assert format_time(datetime(2026, 12, 25, 7, 5)) == "0705"
    assert format_display(datetime(2026, 12, 25, 7, 5)) == "Dec 25 2026 0705"


def test_storage_form_round_trips() -> None:
    dt = datetime(2026, 2, 4, 18, 0)
    assert format_storage(dt) == "2026-02-04 1800"
    assert parse_full_datetime(format_storage(dt)) == dt
