"""Shared dependencies and helper functions for API routers.

Usage in routers:
    from api.dependencies import get_task_store, serialize_task, parse_task_id
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from fastapi import Request

from task_board.config import Settings, load_settings
from task_board.task_store import Task, TaskNotFoundError, TaskStore

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# =============================================================================
# Cached Functions
# =============================================================================

@lru_cache
def get_settings() -> Settings:
    """Get application settings from the environment (cached)."""
    return load_settings()


# =============================================================================
# Request Dependencies
# =============================================================================

def get_task_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    return request.app.state.task_store


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


# =============================================================================
# Serialization Helpers
# =============================================================================

def serialize_task(task: Task) -> dict:
    """Serialize a Task to API response format."""
    return task.to_api_dict()


# =============================================================================
# Task Lookup Helpers
# =============================================================================

def parse_task_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path segment ("12abc" -> 12).

    Returns None when the segment does not start with a number.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def require_task_id(raw: str) -> int:
    """Parse a path id, treating an unparsable id as an unknown task.

    Raises:
        TaskNotFoundError: if ``raw`` has no leading integer.
    """
    task_id = parse_task_id(raw)
    if task_id is None:
        raise TaskNotFoundError(raw)
    return task_id
