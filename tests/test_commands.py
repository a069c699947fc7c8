# tests/test_commands.py

from __future__ import annotations

import json

from tasktracker.cli.commands import CommandRegistry, registry
from tasktracker.tasks.task_models import Priority


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_done_flow(state) -> None:
    assert registry.handle(state, "/add Write docs") == "Added: ⬜ [MEDIUM] Write docs (ID: 1)"
    assert registry.handle(state, "/add -p HIGH Fix bug") == "Added: ⬜ [HIGH  ] Fix bug (ID: 2)"
    assert registry.handle(state, "/done 1") == "Completed: Write docs"

    assert registry.handle(state, "/list done") == "  ✅ [MEDIUM] Write docs (ID: 1)"
    assert registry.handle(state, "/ls pending high") == "  ⬜ [HIGH  ] Fix bug (ID: 2)"
    assert registry.handle(state, "/list low") == "  No tasks found"
    assert "Usage" in (registry.handle(state, "/list whatever") or "")


def test_add_uses_configured_default_priority(state) -> None:
    state.settings.default_priority = "low"
    registry.handle(state, "/add chores")
    assert state.task_store.get(1).priority == Priority.LOW


def test_validation_errors_become_messages(state) -> None:
    assert (registry.handle(state, "/add") or "").startswith("Invalid input:")
    assert (registry.handle(state, "/add -p urgent x") or "").startswith("Invalid input:")
    assert len(state.task_store) == 0

    registry.handle(state, "/add keep")
    assert (registry.handle(state, "/rename 1") or "").startswith("Invalid input:")
    assert state.task_store.get(1).title == "keep"


def test_id_commands_report_usage_and_not_found(state) -> None:
    for cmd in ("done", "undo", "show", "delete", "rename"):
        assert "Usage" in (registry.handle(state, f"/{cmd}") or "")
        assert "Usage" in (registry.handle(state, f"/{cmd} abc") or "")
    assert registry.handle(state, "/done 9") == "No task with ID 9."
    assert registry.handle(state, "/rm 9") == "No task with ID 9."
    assert "Usage" in (registry.handle(state, "/priority 1") or "")


def test_show_rename_priority_undo_delete(state) -> None:
    registry.handle(state, "/add first")
    data = json.loads(registry.handle(state, "/show 1") or "{}")
    assert data["id"] == 1
    assert data["title"] == "first"
    assert data["priority"] == "medium"
    assert data["completed"] is False
    assert "createdAt" in data

    assert registry.handle(state, "/rename 1 better title") == (
        "Renamed: ⬜ [MEDIUM] better title (ID: 1)"
    )
    assert registry.handle(state, "/priority 1 Low") == "Priority set: ⬜ [LOW   ] better title (ID: 1)"

    registry.handle(state, "/done 1")
    assert registry.handle(state, "/undo 1") == "Reopened: better title"
    assert state.task_store.get(1).completed is False

    assert registry.handle(state, "/delete 1") == "Deleted task 1."
    assert state.task_store.get(1) is None


def test_stats_status_and_clear(state) -> None:
    registry.handle(state, "/add -p high a")
    registry.handle(state, "/add b")
    registry.handle(state, "/done 1")

    stats = registry.handle(state, "/stats") or ""
    assert "Total: 2" in stats
    assert "Completed: 1" in stats
    assert "Pending: 1" in stats
    assert "High/Medium/Low: 1/1/0" in stats

    status = registry.handle(state, "/status") or ""
    assert "tasktracker-test" in status
    assert "2 (1 done, 1 pending)" in status

    notes: list[str] = []
    assert "cleared" in (registry.handle(state, "/clear", emit=notes.append) or "")
    assert notes == ["Removing 2 task(s)..."]
    registry.handle(state, "/add again")
    assert state.task_store.get(1).title == "again"


def test_help_lists_registered_commands(state) -> None:
    text = registry.handle(state, "/?") or ""
    for name in ("add", "list", "done", "delete", "stats", "clear"):
        assert f"/{name} - " in text
