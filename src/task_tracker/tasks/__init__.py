"""
Task subsystem.

Components:
- task_models.py: data structures (User, Task, TaskStatus, LogEntry)
- user_store.py / task_store.py / log_store.py: SQLite-backed stores
- task_logic.py: business rules (lifecycle, referential checks, audit coupling)
"""
