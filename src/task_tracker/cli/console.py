# src/task_tracker/cli/console.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .commands import registry as command_registry

logger = logging.getLogger(__name__)


def _prompt(state: AppState) -> str:
    user = state.current_user
    return f"[{user.name}] > " if user is not None else "[guest] > "


def run_console_loop(state: AppState) -> None:
    logger.info("Console started (user=%s).", getattr(state.current_user, "code", None))
    print("Type /help for commands, /exit to quit.")

    while True:
        try:
            line = input(_prompt(state)).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if not line.startswith("/"):
            line = "/" + line

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply)

    logger.info("Console finished.")
