# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskLogic depends on Protocols instead of the SQLite stores.
This keeps storage swappable and lets tests run against in-memory fakes.
"""

from typing import Protocol

from ..tasks.task_models import LogEntry, Task, User


class UserRepo(Protocol):
    def find_by_code(self, code: int) -> User | None: ...


class TaskRepo(Protocol):
    def find_all(self) -> list[Task]: ...
    def find_by_code(self, code: int) -> Task | None: ...

    # Insert-or-update by code (used for both create and status change).
    def save(self, task: Task) -> None: ...


class LogRepo(Protocol):
    """Append-only audit log."""

    def save(self, entry: LogEntry) -> None: ...
    def find_by_task_code(self, task_code: int) -> list[LogEntry]: ...

    # Reserved for cascade delete; not used by current operations.
    def delete_by_task_code(self, task_code: int) -> int: ...
