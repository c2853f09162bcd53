# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import AppError, DuplicateCodeError, ReferenceNotFoundError, ValidationError
from ..core.state import AppState
from ..tasks.task_logic import MSG_USER_NOT_FOUND
from ..tasks.task_models import TaskStatus, User

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except AppError as e:
            logger.info("/%s failed: %s", name, e.message)
            return f"Error: {e.message}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _int_arg(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{what} must be a number, got {raw!r}") from None


def _require_login(state: AppState) -> User:
    if state.current_user is None:
        raise ValidationError("please log in first: /login <user_code>")
    return state.current_user


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_login(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /login <user_code>"
    user = state.user_store.find_by_code(_int_arg(args[0], "user code"))
    if user is None:
        raise ReferenceNotFoundError(MSG_USER_NOT_FOUND)
    state.current_user = user
    logger.info("Logged in user code=%s", user.code)
    return f"Welcome, {user.name}."


def cmd_logout(state: AppState, args: list[str]) -> str:
    if state.current_user is None:
        return "Not logged in."
    state.current_user = None
    return "Logged out."


def cmd_whoami(state: AppState, args: list[str]) -> str:
    user = state.current_user
    if user is None:
        return "Not logged in."
    return f"{user.code}. {user.name}"


def cmd_users(state: AppState, args: list[str]) -> str:
    users = state.user_store.list_users()
    if not users:
        return "No users registered. Add one with /useradd <code> <name>."
    return "\n".join(f"{u.code}. {u.name}" for u in users)


def cmd_useradd(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /useradd <code> <name>"
    code = _int_arg(args[0], "user code")
    user = state.user_store.add_user(code, " ".join(args[1:]))
    return f"User {user.name} added with code {user.code}."


def cmd_list(state: AppState, args: list[str]) -> str:
    actor = _require_login(state)
    views = state.logic.list_tasks(actor)
    if not views:
        return "No tasks yet."
    return "\n".join(v.render() for v in views)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <task_code> <user_code> <name...>
    """
    actor = _require_login(state)
    if len(args) < 3:
        return "Usage: /add <task_code> <user_code> <name>"
    code = _int_arg(args[0], "task code")
    if state.task_store.find_by_code(code) is not None:
        raise DuplicateCodeError(f"task code {code} already exists")
    rep_user_code = _int_arg(args[1], "user code")
    task = state.logic.create(code, " ".join(args[2:]), rep_user_code, actor)
    return f"Task {task.code} assigned to {task.assignee.name}, status: {task.status.label}."


def cmd_status(state: AppState, args: list[str]) -> str:
    """
    /status <task_code> <status>
    status: 1 | 2 | "in_progress" | "done"
    """
    actor = _require_login(state)
    if len(args) < 2:
        return "Usage: /status <task_code> <status> (1 = in progress, 2 = done)"
    code = _int_arg(args[0], "task code")
    try:
        status = TaskStatus.parse(" ".join(args[1:]))
    except ValueError:
        raise ValidationError(f"unknown status {' '.join(args[1:])!r}") from None
    task = state.logic.change_status(code, status, actor)
    return f"{task.name} is now {task.status.label}."


def cmd_log(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /log <task_code>"
    entries = state.logic.history(_int_arg(args[0], "task code"))
    if not entries:
        return "No log entries."
    return "\n".join(
        f"{e.date.isoformat()} user {e.actor_code} -> {e.status.label}" for e in entries
    )


def cmd_delete(state: AppState, args: list[str]) -> str:
    _require_login(state)
    if len(args) != 1:
        return "Usage: /delete <task_code>"
    state.logic.delete(_int_arg(args[0], "task code"))
    return "Deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("login", cmd_login, help_text="Log in: /login <user_code>.")
registry.register("logout", cmd_logout, help_text="Log out.")
registry.register("whoami", cmd_whoami, help_text="Show the logged-in user.")
registry.register("users", cmd_users, help_text="List registered users.")
registry.register("useradd", cmd_useradd, help_text="Register a user: /useradd <code> <name>.")
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text="Create a task: /add <task_code> <user_code> <name>."
)
registry.register(
    "status", cmd_status, help_text="Advance a task: /status <task_code> <1|2>."
)
registry.register("log", cmd_log, help_text="Show the audit log of a task: /log <task_code>.")
registry.register("delete", cmd_delete, help_text="Delete a task (not supported yet).")
