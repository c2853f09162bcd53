# tests/test_stores.py

from __future__ import annotations

import sqlite3
from datetime import date
from pathlib import Path

import pytest

from task_tracker.core.errors import DuplicateCodeError
from task_tracker.tasks.log_store import LogStore
from task_tracker.tasks.task_models import LogEntry, Task, TaskStatus, User
from task_tracker.tasks.task_store import TaskStore
from task_tracker.tasks.user_store import UserStore


def test_user_store_add_find_list(tmp_path: Path) -> None:
    store = UserStore(tmp_path / "db.sqlite3")

    store.add_user(2, "Bob")
    store.add_user(1, "  Alice ")

    assert store.find_by_code(1) == User(1, "Alice")
    assert store.find_by_code(3) is None
    assert [u.code for u in store.list_users()] == [1, 2]
    assert store.count_users() == 2

    with pytest.raises(DuplicateCodeError):
        store.add_user(1, "Other")
    with pytest.raises(ValueError):
        store.add_user(9, " ")


def test_task_store_insert_then_update(tmp_path: Path) -> None:
    db = tmp_path / "db.sqlite3"
    users = UserStore(db)
    alice = users.add_user(1, "Alice")
    store = TaskStore(db, users)

    store.save(Task(code=100, name="Design", status=TaskStatus.NOT_STARTED, assignee=alice))
    task = store.find_by_code(100)
    assert task == Task(100, "Design", TaskStatus.NOT_STARTED, alice)

    task.status = TaskStatus.IN_PROGRESS
    store.save(task)

    assert store.count_tasks() == 1
    assert store.find_by_code(100).status is TaskStatus.IN_PROGRESS
    assert store.find_by_code(101) is None


def test_task_store_find_all_sorted_by_code(tmp_path: Path) -> None:
    db = tmp_path / "db.sqlite3"
    users = UserStore(db)
    alice = users.add_user(1, "Alice")
    store = TaskStore(db, users)

    for code in (30, 10, 20):
        store.save(Task(code, f"t{code}", TaskStatus.NOT_STARTED, alice))

    assert [t.code for t in store.find_all()] == [10, 20, 30]


def test_task_store_missing_assignee_is_hydrated_as_unknown(tmp_path: Path) -> None:
    db = tmp_path / "db.sqlite3"
    users = UserStore(db)
    store = TaskStore(db, users)

    store.save(Task(1, "Orphan", TaskStatus.DONE, User(77, "Ghost")))

    assert store.find_by_code(1).assignee == User(77, "unknown")


def test_log_store_append_and_cascade_delete(tmp_path: Path) -> None:
    store = LogStore(tmp_path / "db.sqlite3")
    day = date(2024, 1, 31)

    store.save(LogEntry(1, 1, TaskStatus.NOT_STARTED, day))
    store.save(LogEntry(2, 1, TaskStatus.NOT_STARTED, day))
    store.save(LogEntry(1, 2, TaskStatus.IN_PROGRESS, day))

    assert store.find_by_task_code(1) == [
        LogEntry(1, 1, TaskStatus.NOT_STARTED, day),
        LogEntry(1, 2, TaskStatus.IN_PROGRESS, day),
    ]
    assert store.count_logs() == 3

    assert store.delete_by_task_code(1) == 2
    assert store.find_by_task_code(1) == []
    assert store.count_logs() == 1


def test_stores_share_one_database(state) -> None:
    alice = state.user_store.find_by_code(1)
    state.logic.create(100, "Design", 1, actor=alice)

    assert state.task_store.find_by_code(100).assignee == alice
    [entry] = state.log_store.find_by_task_code(100)
    assert entry.actor_code == 1
    assert entry.status is TaskStatus.NOT_STARTED
    assert entry.date == date.today()


def test_task_store_survives_unknown_stored_status(tmp_path: Path) -> None:
    db = tmp_path / "db.sqlite3"
    users = UserStore(db)
    alice = users.add_user(1, "Alice")
    store = TaskStore(db, users)
    store.save(Task(1, "Legacy", TaskStatus.IN_PROGRESS, alice))

    conn = sqlite3.connect(str(db))
    try:
        conn.execute("UPDATE tasks SET status = 9 WHERE code = 1")
        conn.commit()
    finally:
        conn.close()

    [task] = store.find_all()
    assert task.status is TaskStatus.NOT_STARTED
