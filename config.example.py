# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "File log level (default: INFO). Console shows WARNING+.",
    # Paths (gitignored)
    "TASK_TRACKER_DATA_DIR": "Local data directory (default: .local/task_tracker).",
    "TASK_TRACKER_DB_PATH": "SQLite path for users/tasks/logs (default: <data_dir>/tasks.sqlite3).",
    # Session
    "TASK_TRACKER_USER": "User code to log in automatically at startup.",
    "TASK_TRACKER_SEED_USERS": "Users created at startup if missing, e.g. '1:Alice,2:Bob'.",
}
