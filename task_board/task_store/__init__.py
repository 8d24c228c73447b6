"""Task store package - task data model and in-memory storage."""
from __future__ import annotations

from .errors import TaskNotFoundError, TaskStoreError, TaskValidationError
from .store import (
    REQUIRED_CREATE_FIELDS,
    Task,
    TaskFilters,
    TaskStatistics,
    TaskStore,
    format_timestamp,
)

__all__ = [
    "REQUIRED_CREATE_FIELDS",
    "Task",
    "TaskFilters",
    "TaskStatistics",
    "TaskStore",
    "TaskStoreError",
    "TaskNotFoundError",
    "TaskValidationError",
    "format_timestamp",
]
