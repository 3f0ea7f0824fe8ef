# src/kiwi/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the clock and the storage swappable and makes testing easier.
"""

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class Clock(Protocol):
    """Source of "today" for time-only date inputs."""

    def today(self) -> date: ...


class TaskRepo(Protocol):
    """Persistent home of the task list (loaded once, saved on exit)."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> None: ...
