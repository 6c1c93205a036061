# tests/test_commands.py

from __future__ import annotations

from nexus_todo.cli.commands import CommandRegistry, registry
from nexus_todo.connectors.console_connector import handle_input
from nexus_todo.core.state import AppState

from .fakes import ManualScheduler


def _add(state: AppState, scheduler: ManualScheduler, text: str) -> None:
    assert handle_input(state, text) == "Adding..."
    scheduler.run_all()


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called: list[tuple[list[str], str]] = []

    def h(state, args, rest):
        called.append((args, rest))
        return "ok"

    reg.register("a", h, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x  y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [(["x", "y"], "x  y"), ([], "")]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    assert registry.handle(state, "hello") is None
    assert "Unknown command" in (registry.handle(state, "/nope") or "")
    assert "Empty command" in (registry.handle(state, "/") or "")


def test_plain_text_adds_and_debounces(state: AppState, scheduler: ManualScheduler) -> None:
    assert handle_input(state, "buy milk") == "Adding..."
    assert "Still adding" in (handle_input(state, "buy milk") or "")
    scheduler.run_all()
    assert [t.text for t in state.todos.tasks] == ["buy milk"]

    assert handle_input(state, "   ") is None
    assert "Nothing to add" in (handle_input(state, "/add   ") or "")


def test_done_rm_by_position(state: AppState, scheduler: ManualScheduler) -> None:
    _add(state, scheduler, "a")
    _add(state, scheduler, "b")

    assert handle_input(state, "/done 2") == "Completed: a"
    assert state.todos.completed_count() == 1
    assert handle_input(state, "/done 2") == "Reopened: a"

    assert handle_input(state, "/rm 1") == "Deleted: b"
    assert [t.text for t in state.todos.tasks] == ["a"]

    assert "No task #7" in (handle_input(state, "/rm 7") or "")
    assert "Which task" in (handle_input(state, "/done") or "")
    assert "No task #x" in (handle_input(state, "/done x") or "")


def test_edit_mode_plain_line_saves(state: AppState, scheduler: ManualScheduler) -> None:
    _add(state, scheduler, "old text")

    assert "Editing #1" in (handle_input(state, "/edit 1") or "")
    assert state.todos.edit_session is not None

    assert handle_input(state, "new text") == "Saved: new text"
    assert state.todos.tasks[0].text == "new text"
    assert state.todos.edit_session is None


def test_edit_mode_blank_line_discards(state: AppState, scheduler: ManualScheduler) -> None:
    _add(state, scheduler, "keep me")
    handle_input(state, "/edit 1")

    assert handle_input(state, "") == "Empty text, edit discarded."
    assert state.todos.tasks[0].text == "keep me"
    assert state.todos.edit_session is None


def test_edit_draft_save_and_cancel(state: AppState, scheduler: ManualScheduler) -> None:
    _add(state, scheduler, "a")

    handle_input(state, "/edit 1")
    assert "Draft" in (handle_input(state, "/draft a b") or "")
    assert handle_input(state, "/cancel") == "Edit cancelled."
    assert state.todos.tasks[0].text == "a"

    handle_input(state, "/edit 1")
    handle_input(state, "/draft  a  b ")
    assert handle_input(state, "/save") == "Saved: a  b"

    assert handle_input(state, "/save") == "Not editing anything. Use /edit N first."
    assert handle_input(state, "/cancel") == "Not editing anything."
    assert "Not editing" in (handle_input(state, "/draft zzz") or "")


def test_edit_inline_text(state: AppState, scheduler: ManualScheduler) -> None:
    _add(state, scheduler, "a")
    assert handle_input(state, "/edit 1 replaced text") == "Saved: replaced text"
    assert handle_input(state, "/edit 1 replaced text") == "No changes."


def test_clear_list_stats_and_reset(state: AppState, scheduler: ManualScheduler) -> None:
    assert "No tasks yet" in (handle_input(state, "/list") or "")
    assert "Nothing to clear" in (handle_input(state, "/clear") or "")

    _add(state, scheduler, "a")
    _add(state, scheduler, "b")
    handle_input(state, "/done 1")

    listing = handle_input(state, "/list") or ""
    assert "NEXUS-TODO" in listing
    assert "[x] b" in listing and "[ ] a" in listing
    assert "/clear removes 1 completed task." in listing

    assert handle_input(state, "/stats") == "Total: 2  Active: 1  Completed: 1"
    assert handle_input(state, "/clear") == "Cleared 1 completed task."

    assert "/reset yes" in (handle_input(state, "/reset") or "")
    assert handle_input(state, "/reset yes") == "All tasks deleted."
    assert state.todos.tasks == ()
    assert state.task_store.load() == []


def test_listing_shows_edit_draft_and_adding(state: AppState, scheduler: ManualScheduler) -> None:
    _add(state, scheduler, "a")
    handle_input(state, "/edit 1")
    handle_input(state, "/draft changed")
    handle_input(state, "/add b")

    listing = handle_input(state, "/ls") or ""
    assert "editing: 'changed'" in listing
    assert "adding..." in listing


def test_help_lists_commands(state: AppState) -> None:
    text = handle_input(state, "/help") or ""
    for name in ("/add", "/done", "/rm", "/edit", "/save", "/cancel", "/clear", "/exit"):
        assert name in text
