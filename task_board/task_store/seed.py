"""Demo tasks loaded at startup when TASK_BOARD_SEED_DEMO=1."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from .store import Task, format_timestamp

DEMO_TASKS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "titulo": "Aprender Node.js",
        "descripcion": "Completar el tutorial de Node.js",
        "categoria": "Educación",
        "prioridad": "alta",
        "completada": False,
    },
    {
        "id": 2,
        "titulo": "Hacer la compra",
        "descripcion": "Comprar frutas y verduras",
        "categoria": "Personal",
        "prioridad": "media",
        "completada": False,
    },
]


def demo_tasks() -> List[Task]:
    """Return fresh Task objects for the demo records, stamped with the current time."""
    stamp = format_timestamp(datetime.now(timezone.utc))
    return [Task.from_api_dict({**record, "fecha": stamp}) for record in DEMO_TASKS]
