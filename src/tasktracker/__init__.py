"""tasktracker: an in-memory task manager with a console front-end."""

from .tasks import Priority, Task, TaskStats, TaskStore, ValidationError

__all__ = ["Priority", "Task", "TaskStats", "TaskStore", "ValidationError"]
__version__ = "0.1.0"
