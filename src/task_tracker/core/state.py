# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.log_store import LogStore
from ..tasks.task_logic import TaskLogic
from ..tasks.task_models import User
from ..tasks.task_store import TaskStore
from ..tasks.user_store import UserStore


@dataclass
class AppState:
    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: Any

    user_store: UserStore
    task_store: TaskStore
    log_store: LogStore
    logic: TaskLogic

    # Logged-in user; task commands require it.
    current_user: User | None = None
