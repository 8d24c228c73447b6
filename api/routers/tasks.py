"""Tasks Router - CRUD over the in-memory task store.

Handles:
- Task listing with category / priority / completion filters
- Single task lookup, creation, update and deletion
- Completion toggle

Mounted at /api/tareas.
"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_task_store, require_task_id, serialize_task
from api.models import TaskCreateRequest, TaskUpdateRequest
from task_board.task_store import TaskFilters, TaskStore

router = APIRouter()


# =============================================================================
# Task Endpoints
# =============================================================================

@router.get("")
@router.get("/", include_in_schema=False)
def list_tasks(
    categoria: Optional[str] = Query(None, description="Filter by category"),
    prioridad: Optional[str] = Query(None, description="Filter by priority"),
    completada: Optional[str] = Query(None, description="'true' for completed, anything else for pending"),
    store: TaskStore = Depends(get_task_store),
) -> List[dict]:
    """List tasks, optionally filtered."""
    filters = TaskFilters(
        category=categoria,
        priority=prioridad,
        completed=None if completada is None else completada == "true",
    )
    return [serialize_task(task) for task in store.list_tasks(filters)]


@router.get("/{task_id}")
def get_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
) -> dict:
    """Get a single task."""
    return serialize_task(store.get_task(require_task_id(task_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_task(
    request: Optional[TaskCreateRequest] = None,
    store: TaskStore = Depends(get_task_store),
) -> dict:
    """Create a new task."""
    request = request or TaskCreateRequest()
    task = store.create_task(
        title=request.title,
        category=request.category,
        priority=request.priority,
        description=request.description,
    )
    return serialize_task(task)


@router.put("/{task_id}")
def update_task(
    task_id: str,
    request: Optional[TaskUpdateRequest] = None,
    store: TaskStore = Depends(get_task_store),
) -> dict:
    """Replace the supplied fields of a task, keeping its id."""
    updates = request.to_updates() if request is not None else {}
    return serialize_task(store.update_task(require_task_id(task_id), updates))


@router.patch("/{task_id}/toggle")
def toggle_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
) -> dict:
    """Flip the completed flag of a task."""
    return serialize_task(store.toggle_task(require_task_id(task_id)))


@router.delete("/{task_id}")
def delete_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
) -> dict:
    """Delete a task and return it."""
    removed = store.delete_task(require_task_id(task_id))
    return {
        "mensaje": "Tarea eliminada",
        "tarea": serialize_task(removed),
    }
