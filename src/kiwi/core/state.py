# src/kiwi/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .ports import Clock, TaskRepo


@dataclass(slots=True)
class AppState:
    """Everything a host holds between two command lines."""

    settings: Settings
    tasks: TaskList
    store: TaskRepo
    clock: Clock


@dataclass(frozen=True, slots=True)
class Reply:
    """
    Result of executing one command.

    - response: text the host prints
    - stop: the host should end the session
    - duplicate_index / pending_task: set when an add was rejected as a duplicate,
      so a host may offer to replace the existing task (1-based index)
    """

    response: str
    stop: bool = False
    duplicate_index: int | None = None
    pending_task: Task | None = None
