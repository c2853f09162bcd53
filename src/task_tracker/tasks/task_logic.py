# src/task_tracker/tasks/task_logic.py

from __future__ import annotations

"""
Task business rules.

TaskLogic owns:
- the status lifecycle (one step forward at a time, DONE -> DONE is a no-op),
- referential checks against the user registry,
- the coupling between a task mutation and its audit log entry.

Storage is injected through the ports in core/ports.py. All validation
happens before any store is touched. Once the task row is written, a failing
log append is NOT rolled back: it is reported as AuditLogError and the task
keeps its new state.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from ..core.errors import (
    AuditLogError,
    InvalidTransitionError,
    ReferenceNotFoundError,
    UnimplementedError,
    ValidationError,
)
from ..core.ports import LogRepo, TaskRepo, UserRepo
from .task_models import LogEntry, Task, TaskStatus, User

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]

MSG_USER_NOT_FOUND = "the specified user code does not exist"
MSG_TASK_NOT_FOUND = "the specified task code does not exist"
MSG_INVALID_TRANSITION = (
    "the requested status must be exactly one step ahead of the current status"
)


@dataclass(frozen=True, slots=True)
class TaskView:
    """A task as seen by a particular actor."""

    code: int
    name: str
    status_label: str
    assignment_label: str

    def render(self) -> str:
        return (
            f"{self.code}. name: {self.name}, "
            f"assignee: {self.assignment_label}, status: {self.status_label}"
        )


def assignment_label(task: Task, actor: User) -> str:
    if task.assignee.code == actor.code:
        return "you are responsible"
    return f"{task.assignee.name} is responsible"


class TaskLogic:
    def __init__(
        self,
        task_store: TaskRepo,
        log_store: LogRepo,
        user_store: UserRepo,
        *,
        today: Callable[[], date] = date.today,
        emit: Emitter | None = None,
    ) -> None:
        self._tasks = task_store
        self._logs = log_store
        self._users = user_store
        self._today = today
        self._emit = emit

    def _confirm(self, text: str) -> None:
        logger.info(text)
        if self._emit is not None:
            self._emit(text)

    def _append_log(self, task: Task, actor: User) -> LogEntry:
        entry = LogEntry(
            task_code=task.code,
            actor_code=actor.code,
            status=task.status,
            date=self._today(),
        )
        try:
            self._logs.save(entry)
        except Exception as exc:
            # Task row is already written; leave it as is.
            logger.exception(
                "Audit append failed after task write task=%s status=%s",
                task.code,
                task.status.name,
            )
            raise AuditLogError(
                f"task {task.code} was saved but its log entry could not be written"
            ) from exc
        return entry

    # ---- queries ----

    def list_tasks(self, actor: User) -> list[TaskView]:
        return [
            TaskView(
                code=t.code,
                name=t.name,
                status_label=t.status.label,
                assignment_label=assignment_label(t, actor),
            )
            for t in self._tasks.find_all()
        ]

    def history(self, code: int) -> list[LogEntry]:
        if self._tasks.find_by_code(code) is None:
            raise ReferenceNotFoundError(MSG_TASK_NOT_FOUND)
        return self._logs.find_by_task_code(code)

    # ---- mutations ----

    def create(self, code: int, name: str, rep_user_code: int, actor: User) -> Task:
        """
        Register a new task in NOT_STARTED and log its creation.

        Code uniqueness is the caller's concern; save() overwrites by code.
        """
        if not name or not name.strip():
            raise ValidationError("task name must not be empty")

        user = self._users.find_by_code(rep_user_code)
        if user is None:
            raise ReferenceNotFoundError(MSG_USER_NOT_FOUND)

        task = Task(code=code, name=name, status=TaskStatus.NOT_STARTED, assignee=user)
        self._tasks.save(task)
        self._append_log(task, actor)

        self._confirm(f"{task.name} has been registered.")
        return task

    def change_status(self, code: int, status: TaskStatus | int, actor: User) -> Task:
        task = self._tasks.find_by_code(code)
        if task is None:
            raise ReferenceNotFoundError(MSG_TASK_NOT_FOUND)

        try:
            requested = TaskStatus(status)
        except ValueError:
            raise InvalidTransitionError(MSG_INVALID_TRANSITION) from None

        if not task.status.can_transition_to(requested):
            logger.debug(
                "Rejected transition task=%s %s -> %s",
                code,
                task.status.name,
                requested.name,
            )
            raise InvalidTransitionError(MSG_INVALID_TRANSITION)

        task.status = requested
        self._tasks.save(task)
        self._append_log(task, actor)

        self._confirm("Status change completed.")
        return task

    def delete(self, code: int) -> None:
        # Cascade semantics (task row + its log entries) are not settled yet.
        raise UnimplementedError("deleting tasks is not supported")
