# src/tasktracker/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: Any

    task_store: TaskRepo

    # The store has no internal locking; front-ends hold this around every call.
    lock: threading.Lock = field(default_factory=threading.Lock)
