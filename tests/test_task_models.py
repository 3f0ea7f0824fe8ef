# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from kiwi.core.errors import TaskValidationError
from kiwi.tasks.task_models import Task, TaskKind


def test_todo_display_and_done_toggle() -> None:
    t = Task.todo("  read book  ")
    assert t.description == "read book"
    assert t.display() == "[T][ ] read book"

    t.mark()
    assert t.display() == "[T][X] read book"
    t.mark()
    assert t.done is True

    t.unmark()
    t.unmark()
    assert t.done is False


def test_deadline_display() -> None:
    t = Task.deadline("submit report", datetime(2026, 2, 15, 23, 59))
    assert t.display() == "[D][ ] submit report (by: Feb 15 2026 2359)"


def test_event_display_shows_start_date_only() -> None:
    t = Task.event("team sync", datetime(2026, 2, 12, 14, 0), datetime(2026, 2, 13, 16, 0))
    assert t.display() == "[E][ ] team sync (at: Feb 12 2026 1400 - 1600)"


def test_event_end_before_start_is_rejected() -> None:
    with pytest.raises(TaskValidationError, match="End time cannot be before start time"):
        Task.event("bad", datetime(2026, 2, 12, 16, 0), datetime(2026, 2, 12, 14, 0))


def test_event_zero_length_is_allowed() -> None:
    at = datetime(2026, 2, 12, 16, 0)
    assert Task.event("instant", at, at).end == at


@pytest.mark.parametrize("desc", ["", "   "])
def test_empty_description_is_rejected(desc: str) -> None:
    with pytest.raises(TaskValidationError):
        Task.todo(desc)


def test_variant_fields_are_checked() -> None:
    with pytest.raises(TaskValidationError):
        Task(TaskKind.DEADLINE, "no date")
    with pytest.raises(TaskValidationError):
        Task(TaskKind.TODO, "x", by=datetime(2026, 1, 1, 0, 0))
    with pytest.raises(TaskValidationError):
        Task(TaskKind.EVENT, "x", start=datetime(2026, 1, 1, 0, 0))


def test_seconds_are_dropped() -> None:
    t = Task.deadline("x", datetime(2026, 1, 1, 10, 30, 45, 123))
    assert t.by == datetime(2026, 1, 1, 10, 30)


def test_description_lowercase_and_internal_whitespace_kept() -> None:
    t = Task.todo("Read  The Book")
    assert t.description == "Read  The Book"
    assert t.description_lowercase() == "read  the book"


@pytest.mark.parametrize("raw,expected", [("T", TaskKind.TODO), ("d", TaskKind.DEADLINE), (" e ", TaskKind.EVENT)])
def test_kind_from_tag_is_case_insensitive(raw: str, expected: TaskKind) -> None:
    assert TaskKind.from_tag(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "X", "TD"])
def test_kind_from_tag_unknown(raw: str | None) -> None:
    assert TaskKind.from_tag(raw) is None
