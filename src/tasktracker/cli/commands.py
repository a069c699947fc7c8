# src/tasktracker/cli/commands.py

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import format_task_line, render_task_list
from ..tasks.task_models import Priority, ValidationError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_PRIORITY_WORDS = {p.value for p in Priority}


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)

            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValidationError as e:
            logger.debug("Command /%s rejected input: %s", name, e)
            return f"Invalid input: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _not_found(task_id: int) -> str:
    return f"No task with ID {task_id}."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    app_name = str(getattr(state.settings, "app_name", "tasktracker"))
    s = state.task_store.stats()
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Tasks: {s.total} ({s.completed} done, {s.pending} pending)"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title...>                 -> add with the configured default priority
    /add -p high <title...>         -> add with an explicit priority
    """
    priority: str = str(getattr(state.settings, "default_priority", Priority.MEDIUM.value))
    if args and args[0] in ("-p", "--priority"):
        if len(args) < 2:
            return "Usage: /add [-p low|medium|high] <title>"
        priority = args[1].lower()
        args = args[2:]

    task = state.task_store.create(" ".join(args), priority)
    return f"Added: {format_task_line(task).strip()}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list                 -> all tasks
    /list done|pending    -> by completion
    /list high            -> by priority (combinable: /list pending high)
    """
    completed: bool | None = None
    priority: str | None = None
    for arg in (a.lower() for a in args):
        if arg in ("done", "completed"):
            completed = True
        elif arg in ("pending", "open", "todo"):
            completed = False
        elif arg in _PRIORITY_WORDS:
            priority = arg
        else:
            return "Usage: /list [done|pending] [low|medium|high]"

    tasks = state.task_store.list(completed=completed, priority=priority)
    return render_task_list(tasks)


def cmd_show(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /show <id>"
    task = state.task_store.get(task_id)
    if task is None:
        return _not_found(task_id)
    return json.dumps(task.to_dict(), ensure_ascii=False, indent=2)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    task = state.task_store.complete(task_id)
    if task is None:
        return _not_found(task_id)
    return f"Completed: {task.title}"


def cmd_undo(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /undo <id>"
    task = state.task_store.update(task_id, completed=False)
    if task is None:
        return _not_found(task_id)
    return f"Reopened: {task.title}"


def cmd_rename(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rename <id> <title>"
    task = state.task_store.update(task_id, title=" ".join(args[1:]))
    if task is None:
        return _not_found(task_id)
    return f"Renamed: {format_task_line(task).strip()}"


def cmd_priority(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None or len(args) != 2:
        return "Usage: /priority <id> <low|medium|high>"
    task = state.task_store.update(task_id, priority=args[1].lower())
    if task is None:
        return _not_found(task_id)
    return f"Priority set: {format_task_line(task).strip()}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    if not state.task_store.delete(task_id):
        return _not_found(task_id)
    return f"Deleted task {task_id}."


def cmd_stats(state: AppState, args: list[str]) -> str:
    s = state.task_store.stats().to_dict()
    by_prio = s["byPriority"]
    return (
        "Stats:\n"
        f"  Total: {s['total']}\n"
        f"  Completed: {s['completed']}\n"
        f"  Pending: {s['pending']}\n"
        f"  High/Medium/Low: {by_prio['high']}/{by_prio['medium']}/{by_prio['low']}"
    )


def cmd_clear(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    removed = state.task_store.count_tasks()
    if emit and removed:
        emit(f"Removing {removed} task(s)...")
    state.task_store.clear()
    logger.info("Task list cleared (removed=%s)", removed)
    return "All tasks cleared. IDs start from 1 again."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show app name and task totals.")
registry.register("add", cmd_add, help_text="Add a task: /add [-p low|medium|high] <title>.")
registry.register(
    "list", cmd_list, help_text="List tasks: /list [done|pending] [low|medium|high].", aliases=["ls"]
)
registry.register("show", cmd_show, help_text="Show one task as JSON: /show <id>.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("undo", cmd_undo, help_text="Mark a task pending again: /undo <id>.")
registry.register("rename", cmd_rename, help_text="Change a title: /rename <id> <title>.")
registry.register(
    "priority", cmd_priority, help_text="Change priority: /priority <id> <low|medium|high>."
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("stats", cmd_stats, help_text="Show totals by status and priority.")
registry.register("clear", cmd_clear, help_text="Delete all tasks and reset IDs.")
