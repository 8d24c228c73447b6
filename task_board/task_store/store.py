"""In-memory Task Store for the Task Board API.

The store is the single owner of the task list and the id counter. Request
handlers receive a ``TaskStore`` instance through dependency injection and
only go through its operations; they never hold the underlying list.

Behaviour:
- ids are assigned sequentially from ``id_start`` and never reused
- the list keeps insertion order, updates never reorder it
- every operation runs under one lock, so each call is a single atomic step
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

REQUIRED_CREATE_FIELDS = ("titulo", "categoria", "prioridad")


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive datetimes are taken to be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass(slots=True)
class Task:
    """A single to-do record."""

    id: int
    title: str
    category: str
    priority: str
    created_at: datetime
    description: str = ""
    completed: bool = False

    def to_api_dict(self) -> Dict[str, Any]:
        """Convert to API response format (Spanish wire keys)."""
        return {
            "id": self.id,
            "titulo": self.title,
            "descripcion": self.description,
            "categoria": self.category,
            "prioridad": self.priority,
            "completada": self.completed,
            "fecha": format_timestamp(self.created_at),
        }

    @classmethod
    def from_api_dict(cls, data: Mapping[str, Any]) -> "Task":
        """Create from a wire-format dictionary."""
        created = _parse_timestamp(data.get("fecha"))
        return cls(
            id=int(data["id"]),
            title=data["titulo"],
            description=data.get("descripcion") or "",
            category=data["categoria"],
            priority=data["prioridad"],
            completed=bool(data.get("completada", False)),
            created_at=created or datetime.now(timezone.utc),
        )


_TASK_ATTRIBUTES = frozenset(f.name for f in fields(Task))


@dataclass(slots=True)
class TaskFilters:
    """Filter criteria for listing tasks.

    ``category`` and ``priority`` only apply when non-empty; ``completed``
    applies whenever it is not None.
    """

    category: Optional[str] = None
    priority: Optional[str] = None
    completed: Optional[bool] = None


@dataclass(slots=True)
class TaskStatistics:
    """Aggregate counts over the current collection."""

    total: int = 0
    completed: int = 0
    pending: int = 0
    by_category: Dict[str, int] = field(default_factory=dict)

    def to_api_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "completadas": self.completed,
            "pendientes": self.pending,
            "porCategoria": dict(self.by_category),
        }


class TaskStore:
    """Owns the in-memory task list and the id counter."""

    def __init__(self, *, id_start: int = 1) -> None:
        if id_start < 1:
            raise ValueError(f"id_start must be a positive integer, got {id_start}")
        self._tasks: List[Task] = []
        self._next_id = id_start
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings) -> "TaskStore":
        """Build a store from ``Settings``, loading demo tasks when enabled."""
        store = cls(id_start=settings.id_start)
        if settings.seed_demo:
            from .seed import demo_tasks

            store.seed(demo_tasks())
        logger.info(
            f"TaskStore ready: {len(store)} task(s), next id {store.next_id}"
        )
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    @property
    def next_id(self) -> int:
        """The id the next successful create will receive."""
        return self._next_id

    def seed(self, tasks: Iterable[Task]) -> None:
        """Append pre-built tasks, moving the counter past the highest id."""
        with self._lock:
            for task in tasks:
                if self._find_index(task.id) is not None:
                    raise ValueError(f"Duplicate seed task id {task.id}")
                self._tasks.append(task)
                self._next_id = max(self._next_id, task.id + 1)

    # =========================================================================
    # Queries
    # =========================================================================

    def list_tasks(self, filters: Optional[TaskFilters] = None) -> List[Task]:
        """Return tasks in collection order, filtered conjunctively."""
        with self._lock:
            result = list(self._tasks)
        if filters:
            result = _apply_filters(result, filters)
        return result

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            index = self._find_index(task_id)
            if index is None:
                raise TaskNotFoundError(task_id)
            return self._tasks[index]

    def statistics(self) -> TaskStatistics:
        """Count tasks overall, by completion state and by category."""
        stats = TaskStatistics()
        with self._lock:
            for task in self._tasks:
                stats.total += 1
                if task.completed:
                    stats.completed += 1
                else:
                    stats.pending += 1
                # None is counted under "null".
                key = "null" if task.category is None else task.category
                stats.by_category[key] = stats.by_category.get(key, 0) + 1
        return stats

    # =========================================================================
    # Mutations
    # =========================================================================

    def create_task(
        self,
        *,
        title: Optional[str],
        category: Optional[str],
        priority: Optional[str],
        description: Optional[str] = None,
    ) -> Task:
        """Create and append a new task.

        Raises:
            TaskValidationError: if title, category or priority is missing or empty.
                The counter is not advanced in that case.
        """
        supplied = {"titulo": title, "categoria": category, "prioridad": priority}
        missing = tuple(name for name in REQUIRED_CREATE_FIELDS if not supplied[name])
        if missing:
            raise TaskValidationError(missing)

        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description or "",
                category=category,
                priority=priority,
                completed=False,
                created_at=datetime.now(timezone.utc),
            )
            self._next_id += 1
            self._tasks.append(task)

        logger.info(f"Created task {task.id} in category {task.category!r}")
        return task

    def update_task(self, task_id: int, updates: Mapping[str, Any]) -> Task:
        """Merge ``updates`` over an existing task.

        Keys are task attribute names. ``id`` and unknown keys are ignored;
        every other supplied value replaces the stored one, including
        ``created_at`` and ``completed``.
        """
        with self._lock:
            task = self.get_task(task_id)
            applied = []
            for key, value in updates.items():
                if key == "id" or key not in _TASK_ATTRIBUTES:
                    continue
                setattr(task, key, value)
                applied.append(key)

        logger.info(f"Updated task {task_id}: {', '.join(applied) or 'no fields'}")
        return task

    def toggle_task(self, task_id: int) -> Task:
        """Flip the completion flag of a task."""
        with self._lock:
            task = self.get_task(task_id)
            task.completed = not task.completed

        logger.info(f"Toggled task {task_id} -> completed={task.completed}")
        return task

    def delete_task(self, task_id: int) -> Task:
        """Remove a task and return the removed record."""
        with self._lock:
            index = self._find_index(task_id)
            if index is None:
                raise TaskNotFoundError(task_id)
            removed = self._tasks.pop(index)

        logger.info(f"Deleted task {task_id}")
        return removed

    def _find_index(self, task_id: int) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None


# =============================================================================
# Filter Helpers
# =============================================================================

def _apply_filters(tasks: List[Task], filters: TaskFilters) -> List[Task]:
    """Apply filter criteria to task list."""
    result = tasks

    if filters.category:
        result = [t for t in result if t.category == filters.category]

    if filters.priority:
        result = [t for t in result if t.priority == filters.priority]

    if filters.completed is not None:
        result = [t for t in result if t.completed == filters.completed]

    return result
