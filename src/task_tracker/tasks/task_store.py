# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from ..core.ports import UserRepo
from .task_models import Task, TaskStatus, User

logger = logging.getLogger(__name__)

_UNKNOWN_USER_NAME = "unknown"


class TaskStore:
    """
    SQLite task store keyed by the caller-supplied task code.

    Only the responsible user's code is persisted; rows are hydrated with the
    full User through the injected user store.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path, user_store: UserRepo) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._users = user_store
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    code INTEGER PRIMARY KEY,
                    name TEXT NOT NULL,
                    status INTEGER NOT NULL DEFAULT 0,
                    rep_user_code INTEGER NOT NULL
                )
                """
            )
            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_rep_user ON tasks(rep_user_code)")
            conn.commit()
        finally:
            conn.close()

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        user_code = int(row["rep_user_code"])
        assignee = self._users.find_by_code(user_code)
        if assignee is None:
            logger.warning("Task code=%s references missing user code=%s", row["code"], user_code)
            assignee = User(code=user_code, name=_UNKNOWN_USER_NAME)
        return Task(
            code=int(row["code"]),
            name=str(row["name"] or ""),
            status=TaskStatus.from_db(row["status"]),
            assignee=assignee,
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def find_all(self) -> list[Task]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM tasks ORDER BY code ASC").fetchall()
        finally:
            conn.close()
        return [self._row_to_task(r) for r in rows]

    def find_by_code(self, code: int) -> Task | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM tasks WHERE code = ?", (int(code),)).fetchone()
        finally:
            conn.close()
        return self._row_to_task(row) if row else None

    def save(self, task: Task) -> None:
        """Insert a new task or overwrite the row with the same code."""
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO tasks(code, name, status, rep_user_code)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(code) DO UPDATE SET
                    name = excluded.name,
                    status = excluded.status,
                    rep_user_code = excluded.rep_user_code
                """,
                (int(task.code), task.name, int(task.status), int(task.assignee.code)),
            )
            conn.commit()
            logger.debug(
                "Task saved code=%s status=%s rep_user=%s",
                task.code,
                task.status.name,
                task.assignee.code,
            )
        finally:
            conn.close()

