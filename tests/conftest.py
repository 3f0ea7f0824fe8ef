# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from kiwi.config import Settings
from kiwi.core.clock import FixedClock
from kiwi.core.state import AppState
from kiwi.tasks.task_list import TaskList
from kiwi.tasks.task_store import TaskStore

TODAY = date(2026, 2, 10)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test data directory."""
    data_dir = tmp_path / "data"
    return Settings(
        app_name="kiwi",
        log_level="WARNING",
        data_dir=data_dir,
        data_file=data_dir / "kiwi.txt",
        log_file=data_dir / "kiwi.log",
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture()
def store(settings: Settings) -> TaskStore:
    return TaskStore(settings.data_file)


@pytest.fixture()
def state(settings: Settings, store: TaskStore, clock: FixedClock) -> AppState:
    """
    AppState wired with a pinned clock.

    NOTE: We keep the real file store here because its correctness is part of
    what we want to test.
    """
    return AppState(settings=settings, tasks=TaskList(), store=store, clock=clock)
