# src/tasktracker/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.ports import TaskRepo
from .task_models import Priority, Task

logger = logging.getLogger(__name__)

DONE_MARK = "✅"
PENDING_MARK = "⬜"
EMPTY_LISTING = "  No tasks found"

SAMPLE_TASKS: tuple[tuple[str, Priority], ...] = (
    ("Learn GitHub Actions basics", Priority.HIGH),
    ("Create first workflow", Priority.HIGH),
    ("Deploy to production", Priority.MEDIUM),
)


def format_task_line(task: Task) -> str:
    """One listing row, e.g. '  ⬜ [HIGH  ] Ship it (ID: 3)'."""
    mark = DONE_MARK if task.completed else PENDING_MARK
    prio = task.priority.value.upper().ljust(6)
    return f"  {mark} [{prio}] {task.title} (ID: {task.id})"


def render_task_list(tasks: Iterable[Task]) -> str:
    lines = [format_task_line(t) for t in tasks]
    if not lines:
        return EMPTY_LISTING
    return "\n".join(lines)


def seed_sample_tasks(store: TaskRepo) -> list[Task]:
    """
    Convenience helper: add the three workshop sample tasks.
    Returns the created tasks in creation order.
    """
    created = [store.create(title, priority) for title, priority in SAMPLE_TASKS]
    logger.info("Seeded %d sample tasks", len(created))
    return created
