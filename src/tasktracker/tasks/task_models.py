# src/tasktracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class ValidationError(ValueError):
    """Raised when a task field value violates its constraints."""


class Priority(StrEnum):
    """Task urgency."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: Any) -> Priority:
        """
        Accept a Priority member or one of the exact lowercase values.

        Anything else (other case, other types, None) is rejected.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw)
            except ValueError:
                pass
        valid = ", ".join(p.value for p in cls)
        raise ValidationError(f"Priority must be one of: {valid}")


def clean_title(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("Task title is required and must be a non-empty string")
    return raw.strip()


@dataclass(slots=True)
class Task:
    id: int
    title: str
    priority: Priority
    completed: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "priority": self.priority.value,
            "completed": self.completed,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(slots=True, frozen=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    by_priority: dict[Priority, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "completed": self.completed,
            "pending": self.pending,
            "byPriority": {
                p.value: self.by_priority.get(p, 0)
                for p in (Priority.HIGH, Priority.MEDIUM, Priority.LOW)
            },
        }
