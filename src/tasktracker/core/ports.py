# src/tasktracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI layer.

Front-ends depend on Protocols instead of the concrete store.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from ..tasks.task_models import Task, TaskStats


class TaskRepo(Protocol):
    # CRUD
    def create(self, title: Any, priority: Any = ...) -> Task: ...
    def get(self, task_id: int) -> Task | None: ...
    def update(
            self,
            task_id: int,
            updates: Mapping[str, Any] | None = None,
            **fields: Any,
    ) -> Task | None: ...
    def complete(self, task_id: int) -> Task | None: ...
    def delete(self, task_id: int) -> bool: ...

    # Queries
    def list(
            self,
            filters: Mapping[str, Any] | None = None,
            *,
            completed: bool | None = None,
            priority: Any = None,
    ) -> list[Task]: ...
    def stats(self) -> TaskStats: ...
    def count_tasks(self) -> int: ...

    def clear(self) -> None: ...
