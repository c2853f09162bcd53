# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import IntEnum

logger = logging.getLogger(__name__)


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Notes:
    - values are persisted as-is (0/1/2), keep them stable
    - DONE is terminal; advancing it is a no-op
    """

    NOT_STARTED = 0
    IN_PROGRESS = 1
    DONE = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    def advance(self) -> TaskStatus:
        if self is TaskStatus.DONE:
            return TaskStatus.DONE
        return TaskStatus(self.value + 1)

    def can_transition_to(self, requested: TaskStatus) -> bool:
        return requested == self.advance()

    @classmethod
    def from_db(cls, raw: int | None) -> TaskStatus:
        if raw is None:
            return cls.NOT_STARTED
        try:
            return cls(int(raw))
        except (TypeError, ValueError):
            logger.warning("Unknown stored status %r; treating as NOT_STARTED", raw)
            return cls.NOT_STARTED

    @classmethod
    def parse(cls, raw: int | str) -> TaskStatus:
        """Accept 1, "1", "in_progress", "in progress", "IN_PROGRESS"."""
        if isinstance(raw, int):
            return cls(raw)
        text = str(raw).strip().lower()
        if text.lstrip("-").isdigit():
            return cls(int(text))
        key = text.replace("-", " ").replace("_", " ")
        for status in cls:
            if key in (status.label, status.name.lower().replace("_", " ")):
                return status
        raise ValueError(f"unknown status: {raw!r}")


_LABELS = {
    TaskStatus.NOT_STARTED: "not started",
    TaskStatus.IN_PROGRESS: "in progress",
    TaskStatus.DONE: "done",
}


@dataclass(frozen=True, slots=True)
class User:
    code: int
    name: str


@dataclass(slots=True)
class Task:
    code: int
    name: str
    status: TaskStatus
    assignee: User


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One audit record: who moved which task to which status, and when."""

    task_code: int
    actor_code: int
    status: TaskStatus
    date: date
