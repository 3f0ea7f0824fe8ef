# src/kiwi/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the local data directory exists,
- wires the clock and the file-backed store into AppState,
- loads the saved task list once.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.clock import SystemClock
from ..core.ports import Clock, TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.data_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings: Settings | None = None,
    store: TaskRepo | None = None,
    clock: Clock | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings/store/clock injectable makes the app easier to test.
    Raises OSError if the data directory cannot be created.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if store is None:
        store = TaskStore(settings.data_file)
    if clock is None:
        clock = SystemClock()

    tasks = TaskList(store.load())
    logger.info("Initial state ready with %d tasks.", len(tasks))
    return AppState(settings=settings, tasks=tasks, store=store, clock=clock)
