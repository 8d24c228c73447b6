"""Statistics Router - aggregate counts over the task store.

Mounted at /api/estadisticas.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_task_store
from task_board.task_store import TaskStore

router = APIRouter()


@router.get("")
@router.get("/", include_in_schema=False)
def get_statistics(store: TaskStore = Depends(get_task_store)) -> dict:
    """Totals, completed/pending counts and counts per category."""
    return store.statistics().to_api_dict()
