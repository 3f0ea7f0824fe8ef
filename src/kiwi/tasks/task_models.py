# src/kiwi/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..core.errors import TaskValidationError
from .datetime_codec import format_display, format_display_date, format_time


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the one-letter tag shown in displays and
    written to the data file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_tag(cls, raw: str | None) -> TaskKind | None:
        """Lenient tag lookup ("t" == "T"); unknown tags -> None."""
        if not raw:
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


def _minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


@dataclass(slots=True)
class Task:
    """
    A tracked task: one of Todo, Deadline or Event.

    Shared state is `description` and `done`; `by` belongs to deadlines,
    `start`/`end` to events. Invariants are checked on construction:
    - description is non-empty (stored trimmed)
    - the variant carries exactly its own datetime fields
    - for events, end is not before start
    """

    kind: TaskKind
    description: str
    done: bool = False
    by: datetime | None = None
    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        self.kind = TaskKind(self.kind)
        self.description = (self.description or "").strip()
        if not self.description:
            raise TaskValidationError("Task description cannot be empty")

        if self.kind is TaskKind.TODO:
            if self.by is not None or self.start is not None or self.end is not None:
                raise TaskValidationError("A todo carries no date/time")
        elif self.kind is TaskKind.DEADLINE:
            if self.by is None:
                raise TaskValidationError("A deadline needs a /by date/time")
            if self.start is not None or self.end is not None:
                raise TaskValidationError("A deadline carries only a /by date/time")
            self.by = _minute(self.by)
        else:
            if self.start is None or self.end is None:
                raise TaskValidationError("An event needs both /from and /to")
            if self.by is not None:
                raise TaskValidationError("An event carries no /by date/time")
            self.start = _minute(self.start)
            self.end = _minute(self.end)
            if self.end < self.start:
                raise TaskValidationError("End time cannot be before start time")

    # ---- constructors ----

    @classmethod
    def todo(cls, description: str, *, done: bool = False) -> Task:
        return cls(TaskKind.TODO, description, done)

    @classmethod
    def deadline(cls, description: str, by: datetime, *, done: bool = False) -> Task:
        return cls(TaskKind.DEADLINE, description, done, by=by)

    @classmethod
    def event(cls, description: str, start: datetime, end: datetime, *, done: bool = False) -> Task:
        return cls(TaskKind.EVENT, description, done, start=start, end=end)

    # ---- state ----

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def description_lowercase(self) -> str:
        return self.description.lower()

    # ---- display ----

    def display(self) -> str:
        head = f"[{self.kind.value}][{self.status_icon}] {self.description}"
        if self.kind is TaskKind.DEADLINE:
            assert self.by is not None
            return f"{head} (by: {format_display(self.by)})"
        if self.kind is TaskKind.EVENT:
            assert self.start is not None and self.end is not None
            # The end date is not shown, only the end time.
            return (
                f"{head} (at: {format_display_date(self.start)} "
                f"{format_time(self.start)} - {format_time(self.end)})"
            )
        return head

    def __str__(self) -> str:
        return self.display()
