"""API Routers Package.

Routers:
- tasks.py: task CRUD and completion toggle (mounted at /api/tareas)
- stats.py: aggregate statistics (mounted at /api/estadisticas)

Usage in main.py:
    from api.routers import tasks_router, stats_router

    app.include_router(tasks_router, prefix="/api/tareas", tags=["tareas"])
    app.include_router(stats_router, prefix="/api/estadisticas", tags=["estadisticas"])
"""

from .tasks import router as tasks_router
from .stats import router as stats_router

__all__ = [
    "tasks_router",
    "stats_router",
]
