"""Errors raised by the in-memory task store."""
from __future__ import annotations

from typing import Tuple


class TaskStoreError(RuntimeError):
    """Base class for task store failures."""


class TaskNotFoundError(TaskStoreError):
    """Raised when no live task has the requested id."""

    def __init__(self, task_id: object) -> None:
        super().__init__(f"Task {task_id!r} not found.")
        self.task_id = task_id


class TaskValidationError(TaskStoreError):
    """Raised when a task cannot be created because required fields are missing."""

    def __init__(self, missing: Tuple[str, ...]) -> None:
        super().__init__(f"Missing required fields: {', '.join(missing)}")
        self.missing = missing
