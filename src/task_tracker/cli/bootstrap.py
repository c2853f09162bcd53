# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite stores into TaskLogic and AppState,
- seeds users and performs the optional auto-login.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import DuplicateCodeError
from ..core.state import AppState
from ..tasks.log_store import LogStore
from ..tasks.task_logic import Emitter, TaskLogic
from ..tasks.task_store import TaskStore
from ..tasks.user_store import UserStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def _seed_users(user_store: UserStore, seed_users) -> None:
    for code, name in seed_users or []:
        try:
            user_store.add_user(code, name)
            logger.info("Seeded user code=%s name=%s", code, name)
        except DuplicateCodeError:
            logger.debug("Seed user code=%s already present", code)


def create_initial_state(*, settings=None, emit: Emitter | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    user_store = UserStore(settings.db_path)
    task_store = TaskStore(settings.db_path, user_store)
    log_store = LogStore(settings.db_path)
    _seed_users(user_store, getattr(settings, "seed_users", None))

    state = AppState(
        settings=settings,
        user_store=user_store,
        task_store=task_store,
        log_store=log_store,
        logic=TaskLogic(task_store, log_store, user_store, emit=emit),
    )

    default_code = getattr(settings, "default_user_code", None)
    if default_code is not None:
        state.current_user = user_store.find_by_code(default_code)
        if state.current_user is None:
            logger.warning("Default user code=%s not found; starting logged out", default_code)

    return state
