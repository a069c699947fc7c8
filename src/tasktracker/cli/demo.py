# src/tasktracker/cli/demo.py

"""
Demo driver: add the sample tasks, complete one, print the listing.

Run with `tasktracker-demo` or `python -m tasktracker.cli.demo`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..tasks.task_api import render_task_list, seed_sample_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

BANNER = "🚀 Task Manager Application\n============================\n"


def run_demo(store: TaskStore | None = None, out: Callable[[str], None] = print) -> TaskStore:
    if store is None:
        store = TaskStore()

    out(BANNER)

    first, *_ = seed_sample_tasks(store)

    out("Added tasks:")
    out(render_task_list(store.list()))

    out(f"\n📝 Completing task: {first.title}")
    store.complete(first.id)

    out("\nCurrent tasks:")
    out(render_task_list(store.list()))

    out("\n✅ Application completed successfully!")
    logger.debug("Demo finished stats=%s", store.stats().to_dict())
    return store


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()
