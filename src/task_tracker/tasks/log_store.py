# src/task_tracker/tasks/log_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from datetime import date
from pathlib import Path

from .task_models import LogEntry, TaskStatus

logger = logging.getLogger(__name__)


class LogStore:
    """
    SQLite audit log.

    Rows are only ever appended by the task layer. The date is stored as an
    ISO string (YYYY-MM-DD), without a time component.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("LogStore ready db=%s total=%s", self._db_path, self.count_logs())

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
                CREATE TABLE IF NOT EXISTS logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    task_code INTEGER NOT NULL,
                    actor_code INTEGER NOT NULL,
                    status INTEGER NOT NULL,
                    change_date TEXT NOT NULL
                )
                """
            )
            cur.execute("CREATE INDEX IF NOT EXISTS idx_logs_task ON logs(task_code)")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> LogEntry:
        return LogEntry(
            task_code=int(row["task_code"]),
            actor_code=int(row["actor_code"]),
            status=TaskStatus.from_db(row["status"]),
            date=date.fromisoformat(row["change_date"]),
        )

    def count_logs(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM logs").fetchone()
            return int(n)
        finally:
            conn.close()

    def save(self, entry: LogEntry) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO logs(task_code, actor_code, status, change_date) VALUES (?, ?, ?, ?)",
                (
                    int(entry.task_code),
                    int(entry.actor_code),
                    int(entry.status),
                    entry.date.isoformat(),
                ),
            )
            conn.commit()
            logger.debug(
                "Log appended task=%s actor=%s status=%s date=%s",
                entry.task_code,
                entry.actor_code,
                entry.status.name,
                entry.date,
            )
        finally:
            conn.close()

    def find_by_task_code(self, task_code: int) -> list[LogEntry]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM logs WHERE task_code = ? ORDER BY id ASC", (int(task_code),)
            ).fetchall()
            return [self._row_to_entry(r) for r in rows]
        finally:
            conn.close()

    def delete_by_task_code(self, task_code: int) -> int:
        """Remove every entry of a task. Reserved for task deletion."""
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM logs WHERE task_code = ?", (int(task_code),))
            conn.commit()
            return int(cur.rowcount)
        finally:
            conn.close()
