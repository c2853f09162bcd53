# src/task_tracker/core/errors.py

"""
Error taxonomy surfaced by the task layer.

Every error carries a human-readable message; the CLI is responsible
for displaying it.
"""

from __future__ import annotations


class AppError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ReferenceNotFoundError(AppError):
    """A referenced user or task code does not exist."""


class InvalidTransitionError(AppError):
    """The requested status is not exactly one step ahead of the current one."""


class ValidationError(AppError):
    """Malformed input (blank names, unparsable codes or statuses)."""


class DuplicateCodeError(AppError):
    pass


class AuditLogError(AppError):
    """The task was mutated but its audit entry could not be appended."""


class UnimplementedError(AppError, NotImplementedError):
    pass
