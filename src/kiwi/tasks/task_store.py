# src/kiwi/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import KiwiError, StorageError
from .datetime_codec import (
    format_storage,
    format_storage_date,
    format_time,
    parse_full_datetime,
)
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)

FIELD_SEP = " | "
EVENT_RANGE_SEP = " to "


class CorruptLine(ValueError):
    """A stored line that cannot be turned back into a task."""


def encode_task(task: Task) -> str:
    """
    One task -> one storage line (no newline).

    T | <0|1> | <desc>
    D | <0|1> | <desc> | YYYY-MM-DD HHMM
    E | <0|1> | <desc> | YYYY-MM-DD HHMM to HHMM
    """
    fields = [task.kind.value, "1" if task.done else "0", task.description]
    if task.kind is TaskKind.DEADLINE:
        assert task.by is not None
        fields.append(format_storage(task.by))
    elif task.kind is TaskKind.EVENT:
        assert task.start is not None and task.end is not None
        fields.append(f"{format_storage(task.start)}{EVENT_RANGE_SEP}{format_time(task.end)}")
    return FIELD_SEP.join(fields)


def decode_line(line: str) -> Task:
    """
    One storage line -> task. Raises CorruptLine.

    The tag is read case-insensitively; anything but "1" in the done
    field reads as not done.
    """
    parts = [p.strip() for p in line.strip().split("|")]
    if len(parts) < 3:
        raise CorruptLine("fewer than 3 fields")

    kind = TaskKind.from_tag(parts[0])
    if kind is None:
        raise CorruptLine(f"unknown tag {parts[0]!r}")

    done = parts[1] == "1"
    description = parts[2]

    try:
        if kind is TaskKind.TODO:
            task = Task.todo(description)
        else:
            if len(parts) < 4:
                raise CorruptLine("missing date/time field")
            if kind is TaskKind.DEADLINE:
                # The stored form is always the full one; no default date applies.
                task = Task.deadline(description, parse_full_datetime(parts[3]))
            else:
                from_full, sep, to_time = parts[3].partition(EVENT_RANGE_SEP)
                if not sep:
                    raise CorruptLine("event range has no ' to '")
                start = parse_full_datetime(from_full.strip())
                end = parse_full_datetime(f"{format_storage_date(start)} {to_time.strip()}")
                task = Task.event(description, start, end)
    except KiwiError as e:
        raise CorruptLine(str(e)) from e

    if done:
        task.mark()
    return task


class TaskStore:
    """
    Plain-text task store (one task per line, fields separated by " | ").

    - load(): missing directory/file -> empty list; corrupted lines are skipped
    - save(): creates the directory, replaces the file atomically
    """

    def __init__(self, path: str | Path = "data/kiwi.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.parent.is_dir() or not self._path.is_file():
            logger.info("No data file at %s; starting with an empty list.", self._path)
            return []

        tasks: list[Task] = []
        skipped = 0
        try:
            data = self._path.read_bytes()
        except OSError:
            logger.exception("Failed to read %s; starting with an empty list.", self._path)
            return []

        # Lines are decoded one by one so a bad byte only costs its own line.
        for lineno, raw in enumerate(data.splitlines(), start=1):
            try:
                line = raw.decode("utf-8").strip()
                if not line:
                    continue
                tasks.append(decode_line(line))
            except (CorruptLine, UnicodeDecodeError) as e:
                skipped += 1
                logger.debug("Skipping line %d of %s: %s", lineno, self._path, e)

        logger.info("Loaded %d tasks from %s (skipped %d).", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) + "\n" for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                f.writelines(lines)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError("Unable to save tasks to file") from e
        logger.info("Saved %d tasks to %s", len(lines), self._path)
