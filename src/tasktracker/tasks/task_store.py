# src/tasktracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from .task_models import Priority, Task, TaskStats, ValidationError, clean_title

logger = logging.getLogger(__name__)

_UPDATABLE = ("title", "priority", "completed")


class TaskStore:
    """
    In-memory task store.

    Tasks are kept in insertion order. Ids come from a counter that starts at 1,
    is never rewound by delete(), and is reset only by clear().

    Records handed out are copies; mutate through update()/complete() only.

    Thread-safety:
    - none; callers sharing a store between threads must hold one lock around it
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        logger.debug("TaskStore ready")

    # ---- low-level helpers ----

    @staticmethod
    def _is_task_id(task_id: object) -> bool:
        return isinstance(task_id, int) and not isinstance(task_id, bool)

    def _find(self, task_id: int) -> Task | None:
        if not self._is_task_id(task_id):
            return None
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    @staticmethod
    def _snapshot(task: Task) -> Task:
        return replace(task)

    @staticmethod
    def _merge(updates: Mapping[str, Any] | None, fields: dict[str, Any]) -> dict[str, Any]:
        merged: dict[str, Any] = dict(updates or {})
        merged.update(fields)
        return merged

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def create(self, title: Any, priority: Any = Priority.MEDIUM) -> Task:
        """Validate, assign the next id and append a new pending task."""
        clean = clean_title(title)
        prio = Priority.parse(priority)

        task = Task(
            id=self._next_id,
            title=clean,
            priority=prio,
            completed=False,
            created_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s priority=%s", task.id, prio.value)
        return self._snapshot(task)

    def get(self, task_id: int) -> Task | None:
        task = self._find(task_id)
        return self._snapshot(task) if task else None

    def list(
        self,
        filters: Mapping[str, Any] | None = None,
        *,
        completed: bool | None = None,
        priority: Priority | str | None = None,
    ) -> list[Task]:
        """
        Return tasks in insertion order.

        Filters (mapping keys or keyword arguments, AND-ed together):
        - completed: keep tasks whose flag equals this value
        - priority: keep tasks with this priority

        None means "no constraint", and so does an empty priority. A completed
        value that is not a bool matches nothing. Unknown mapping keys are ignored.
        """
        crit = self._merge(
            filters,
            {k: v for k, v in (("completed", completed), ("priority", priority)) if v is not None},
        )
        want_completed = crit.get("completed")
        want_priority = crit.get("priority")

        out: list[Task] = []
        for task in self._tasks:
            if want_completed is not None and task.completed is not want_completed:
                continue
            if want_priority and task.priority != want_priority:
                continue
            out.append(self._snapshot(task))
        return out

    def update(
        self,
        task_id: int,
        updates: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> Task | None:
        """
        Apply title/priority/completed changes to one task.

        Returns None for an unknown id. Everything is validated before the
        record is touched, so a ValidationError leaves the task as it was.
        id and created_at are not updatable; other keys are ignored.
        """
        task = self._find(task_id)
        if task is None:
            return None

        changes = {k: v for k, v in self._merge(updates, fields).items() if k in _UPDATABLE}

        new_title = clean_title(changes["title"]) if "title" in changes else task.title
        new_priority = Priority.parse(changes["priority"]) if "priority" in changes else task.priority
        new_completed = bool(changes["completed"]) if "completed" in changes else task.completed

        task.title = new_title
        task.priority = new_priority
        task.completed = new_completed

        if changes:
            logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return self._snapshot(task)

    def complete(self, task_id: int) -> Task | None:
        return self.update(task_id, completed=True)

    def delete(self, task_id: int) -> bool:
        if not self._is_task_id(task_id):
            return False
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[i]
                logger.debug("Task deleted id=%s", task_id)
                return True
        return False

    def stats(self) -> TaskStats:
        by_priority = {p: 0 for p in Priority}
        done = 0
        for task in self._tasks:
            by_priority[task.priority] += 1
            if task.completed:
                done += 1

        total = len(self._tasks)
        return TaskStats(
            total=total,
            completed=done,
            pending=total - done,
            by_priority=by_priority,
        )

    def clear(self) -> None:
        removed = len(self._tasks)
        self._tasks = []
        self._next_id = 1
        logger.debug("TaskStore cleared removed=%s", removed)


__all__ = ["TaskStore", "ValidationError"]
