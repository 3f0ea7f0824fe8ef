# tests/test_bootstrap.py

from __future__ import annotations

from datetime import date
from pathlib import Path

from kiwi.cli.bootstrap import create_initial_state
from kiwi.cli.main import main
from kiwi.config import Settings
from kiwi.core.clock import FixedClock, SystemClock
from kiwi.tasks.task_models import Task
from kiwi.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


def test_defaults_live_under_working_directory(tmp_path: Path) -> None:
    s = Settings.defaults(tmp_path)
    assert s.data_file == tmp_path / "data" / "kiwi.txt"
    assert s.log_file.parent == s.data_dir

    rel = Settings.defaults()
    assert rel.data_file == Path("data") / "kiwi.txt"


def test_initial_state_loads_saved_tasks(settings: Settings) -> None:
    TaskStore(settings.data_file).save([Task.todo("a"), Task.todo("b")])

    state = create_initial_state(settings=settings)

    assert [t.description for t in state.tasks] == ["a", "b"]
    assert isinstance(state.clock, SystemClock)


def test_initial_state_with_injected_store_and_clock(settings: Settings) -> None:
    clock = FixedClock(date(2026, 1, 1))
    state = create_initial_state(settings=settings, store=FakeTaskRepo([Task.todo("x")]), clock=clock)

    assert state.clock is clock
    assert state.tasks.size() == 1
    assert settings.data_dir.is_dir()


def test_main_returns_one_when_data_dir_is_unusable(tmp_path: Path) -> None:
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", "utf-8")

    assert main(Settings.defaults(tmp_path)) == 1
