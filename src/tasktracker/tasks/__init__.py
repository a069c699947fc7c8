"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskStats, ValidationError)
- task_store.py: in-memory storage with CRUD, filter and stats operations
- task_api.py: small high-level helpers used by the CLI (listing, seeding)
"""

from .task_models import Priority, Task, TaskStats, ValidationError
from .task_store import TaskStore

__all__ = ["Priority", "Task", "TaskStats", "TaskStore", "ValidationError"]
