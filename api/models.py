"""Pydantic request models for the task routes.

Field names are the store's attribute names; aliases are the Spanish wire
keys used by the HTTP API.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Task Models
# =============================================================================

class TaskCreateRequest(BaseModel):
    """Request body for creating a task.

    Presence of titulo/categoria/prioridad is checked by the store so that
    a missing field yields the same error as an empty one.
    """

    title: Optional[str] = Field(None, alias="titulo", description="Task title (required)")
    description: Optional[str] = Field(None, alias="descripcion")
    category: Optional[str] = Field(None, alias="categoria", description="Category (required)")
    priority: Optional[str] = Field(None, alias="prioridad", description="Priority (required)")


class TaskUpdateRequest(BaseModel):
    """Request body for replacing some or all task fields.

    Only fields present in the body are applied. ``id`` is accepted but never
    applied; unknown keys are dropped.
    """

    id: Optional[Any] = None
    title: Optional[str] = Field(None, alias="titulo")
    description: Optional[str] = Field(None, alias="descripcion")
    category: Optional[str] = Field(None, alias="categoria")
    priority: Optional[str] = Field(None, alias="prioridad")
    completed: Optional[bool] = Field(None, alias="completada")
    created_at: Optional[datetime] = Field(None, alias="fecha")

    def to_updates(self) -> Dict[str, Any]:
        """Return the supplied fields keyed by task attribute name."""
        updates = self.model_dump(exclude_unset=True)
        updates.pop("id", None)
        return updates
