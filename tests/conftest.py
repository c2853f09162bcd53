# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.core.state import AppState
from task_tracker.tasks.task_logic import TaskLogic

from .fakes import ALICE, BOB, TODAY, FakeLogRepo, FakeTaskRepo, FakeUserRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        db_path=tmp_path / "tasks.sqlite3",
        default_user_code=None,
        seed_users=[(ALICE.code, ALICE.name), (BOB.code, BOB.name)],
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with real SQLite stores in tmp_path."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def users() -> FakeUserRepo:
    return FakeUserRepo([ALICE, BOB])


@pytest.fixture()
def tasks() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def logs() -> FakeLogRepo:
    return FakeLogRepo()


@pytest.fixture()
def emitted() -> list[str]:
    return []


@pytest.fixture()
def logic(tasks, logs, users, emitted) -> TaskLogic:
    return TaskLogic(tasks, logs, users, today=lambda: TODAY, emit=emitted.append)
