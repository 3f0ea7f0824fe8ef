# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from kiwi.core.errors import StorageError
from kiwi.tasks.task_models import Task


class FakeTaskRepo:
    """
    In-memory TaskRepo.

    - `initial` is returned by load()
    - every save() call is captured as a snapshot of display strings
    """

    def __init__(self, initial: list[Task] | None = None) -> None:
        self.initial = list(initial or [])
        self.saves: list[list[str]] = []

    def load(self) -> list[Task]:
        return list(self.initial)

    def save(self, tasks: Iterable[Task]) -> None:
        self.saves.append([t.display() for t in tasks])


class FailingTaskRepo(FakeTaskRepo):
    """TaskRepo whose save() always fails."""

    def save(self, tasks: Iterable[Task]) -> None:
        raise StorageError("Unable to save tasks to file")


class ScriptedInput:
    """
    Stand-in for input(): returns scripted lines, then raises EOFError.
    Prompts are recorded for assertions.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)
