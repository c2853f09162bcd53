# src/task_tracker/tasks/user_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from ..core.errors import DuplicateCodeError
from .task_models import User

logger = logging.getLogger(__name__)


class UserStore:
    """
    SQLite user registry.

    The task layer only reads from it (find_by_code); add_user exists so the
    CLI can seed and manage people.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("UserStore ready db=%s total=%s", self._db_path, self.count_users())

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
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    code INTEGER PRIMARY KEY,
                    name TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(code=int(row["code"]), name=str(row["name"] or ""))

    # ---- public API ----

    def count_users(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM users").fetchone()
            return int(n)
        finally:
            conn.close()

    def find_by_code(self, code: int) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE code = ?", (int(code),)).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    def list_users(self) -> list[User]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM users ORDER BY code ASC").fetchall()
            return [self._row_to_user(r) for r in rows]
        finally:
            conn.close()

    def add_user(self, code: int, name: str) -> User:
        if not name or not name.strip():
            raise ValueError("name is required")

        user = User(code=int(code), name=name.strip())
        conn = self._get_conn()
        try:
            conn.execute("INSERT INTO users(code, name) VALUES (?, ?)", (user.code, user.name))
            conn.commit()
        except sqlite3.IntegrityError as exc:
            raise DuplicateCodeError(f"user code {user.code} already exists") from exc
        finally:
            conn.close()

        logger.debug("User added code=%s name=%s", user.code, user.name)
        return user
