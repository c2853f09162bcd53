# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk except the local .env file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASK_TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, raw)
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_seed_users(items: list[str]) -> list[tuple[int, str]]:
    """
    Parse "code:name" pairs, e.g. ["1:Alice", "2:Bob"].

    Malformed items are skipped with a warning.
    """
    out: list[tuple[int, str]] = []
    for item in items:
        code_s, sep, name = item.partition(":")
        if not sep or not name.strip():
            logger.warning("Skipping malformed seed user %r (expected code:name)", item)
            continue
        try:
            code = int(code_s)
        except ValueError:
            logger.warning("Skipping seed user with non-integer code %r", item)
            continue
        out.append((code, name.strip()))
    return out


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path

    # ---- Session ----
    default_user_code: int | None
    seed_users: list[tuple[int, str]]

    @staticmethod
    def from_env() -> "Settings":
        # .env is looked up from the working directory, not from this package.
        load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "task-tracker") or "task-tracker"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_tracker"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "tasks.sqlite3")

        default_user_code = _env_int(_k("USER"), None)
        seed_users = parse_seed_users(_env_list(_k("SEED_USERS"), []))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            db_path=db_path,
            default_user_code=default_user_code,
            seed_users=seed_users,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
