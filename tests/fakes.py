# tests/fakes.py

from __future__ import annotations

from dataclasses import replace
from datetime import date

from task_tracker.tasks.task_models import LogEntry, Task, User

TODAY = date(2024, 5, 17)

ALICE = User(code=1, name="Alice")
BOB = User(code=2, name="Bob")


class FakeUserRepo:
    def __init__(self, users: list[User] | None = None) -> None:
        self.users = {u.code: u for u in users or []}

    def find_by_code(self, code: int) -> User | None:
        return self.users.get(code)


class FakeTaskRepo:
    """
    In-memory TaskRepo.

    Stores copies so tests can tell whether TaskLogic really called save().
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks = {t.code: replace(t) for t in tasks or []}
        self.saves: list[Task] = []

    def find_all(self) -> list[Task]:
        return [replace(self.tasks[c]) for c in sorted(self.tasks)]

    def find_by_code(self, code: int) -> Task | None:
        t = self.tasks.get(code)
        return replace(t) if t is not None else None

    def save(self, task: Task) -> None:
        self.saves.append(replace(task))
        self.tasks[task.code] = replace(task)


class FakeLogRepo:
    def __init__(self, *, fail: bool = False) -> None:
        self.entries: list[LogEntry] = []
        self.fail = fail

    def save(self, entry: LogEntry) -> None:
        if self.fail:
            raise OSError("log storage unavailable")
        self.entries.append(entry)

    def find_by_task_code(self, task_code: int) -> list[LogEntry]:
        return [e for e in self.entries if e.task_code == task_code]

    def delete_by_task_code(self, task_code: int) -> int:
        before = len(self.entries)
        self.entries = [e for e in self.entries if e.task_code != task_code]
        return before - len(self.entries)
