# src/kiwi/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered task collection with 1-based, user-facing indices.

    Order is preserved on every mutation; after a delete the indices of later
    tasks shift down by one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def _offset(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise TaskIndexError("index out of range")
        return index - 1

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.unmark()
        return task

    def delete(self, index: int) -> Task:
        return self._tasks.pop(self._offset(index))

    def replace(self, index: int, task: Task) -> Task:
        """Put `task` at `index`; returns the task it replaced."""
        offset = self._offset(index)
        old = self._tasks[offset]
        self._tasks[offset] = task
        return old

    def clear(self) -> None:
        self._tasks.clear()

    def find(self, keyword: str) -> list[Task]:
        needle = keyword.strip().lower()
        return [t for t in self._tasks if needle in t.description_lowercase()]

    def index_of_duplicate(self, task: Task) -> int | None:
        """1-based index of the first task with the same lowercased description."""
        key = task.description_lowercase()
        for i, existing in enumerate(self._tasks, start=1):
            if existing.description_lowercase() == key:
                return i
        return None

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"TaskList({self._tasks!r})"
