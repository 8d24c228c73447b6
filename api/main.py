"""FastAPI service for the Task Board."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_app_settings, get_settings, get_task_store
from api.errors import register_exception_handlers
from api.routers import stats_router, tasks_router
from task_board.config import Settings
from task_board.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TaskStore] = None,
) -> FastAPI:
    """Build the application around a task store.

    Args:
        settings: Runtime settings; loaded from the environment when omitted.
        store: Store to serve; a new one is built from ``settings`` when omitted.
    """
    settings = settings or get_settings()
    if store is None:
        store = TaskStore.from_settings(settings)

    app = FastAPI(
        title="Task Board API",
        version="0.1.0",
        description="In-memory task list with filtering and statistics.",
    )
    app.state.settings = settings
    app.state.task_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials="*" not in settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(tasks_router, prefix="/api/tareas", tags=["tareas"])
    app.include_router(stats_router, prefix="/api/estadisticas", tags=["estadisticas"])

    @app.get("/health")
    def health_check(
        app_settings: Settings = Depends(get_app_settings),
        task_store: TaskStore = Depends(get_task_store),
    ) -> dict:
        """Health check endpoint with environment and task count."""
        return {
            "status": "ok",
            "time": datetime.now(timezone.utc).isoformat(),
            "environment": app_settings.environment,
            "taskCount": len(task_store),
        }

    logger.debug(f"Application created for environment {settings.environment!r}")
    return app


app = create_app()
