# src/nexus_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task
from .view import render_stats, render_task_list

# handler(state, args, rest): `rest` is the raw text after the command name.
CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, rest.split(), rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text adds a task (or replaces the draft while editing).")
        return "\n".join(lines)


registry = CommandRegistry()


def _color(state: AppState) -> bool:
    return bool(getattr(state.settings, "console_color", False))


def _task_at(state: AppState, args: list[str]) -> Task | None:
    """Resolve a 1-based list position from the first argument."""
    if not args:
        return None
    try:
        pos = int(args[0])
    except ValueError:
        return None
    tasks = state.todos.tasks
    if pos < 1 or pos > len(tasks):
        return None
    return tasks[pos - 1]


def _no_task(args: list[str]) -> str:
    if not args:
        return "Which task? Give its number from /list."
    return f"No task #{args[0]}. Use /list to see numbers."


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    app_name = str(getattr(state.settings, "app_name", "nexus-todo"))
    return render_task_list(state.todos, title=app_name.upper(), color=_color(state))


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    todos = state.todos
    if todos.is_adding:
        return "Still adding the previous task, try again in a moment."
    if not todos.add(rest):
        return "Nothing to add (task text is empty)."
    return "Adding..."


def cmd_done(state: AppState, args: list[str], rest: str) -> str:
    task = _task_at(state, args)
    if task is None:
        return _no_task(args)
    state.todos.toggle(task.id)
    return f"{'Reopened' if task.completed else 'Completed'}: {task.text}"


def cmd_rm(state: AppState, args: list[str], rest: str) -> str:
    task = _task_at(state, args)
    if task is None:
        return _no_task(args)
    state.todos.remove(task.id)
    return f"Deleted: {task.text}"


def cmd_edit(state: AppState, args: list[str], rest: str) -> str:
    """
    /edit N        -> start editing task N (draft = current text)
    /edit N text   -> replace task N's text in one step
    """
    task = _task_at(state, args)
    if task is None:
        return _no_task(args)
    todos = state.todos
    todos.begin_edit(task.id, task.text)

    new_text = rest.split(maxsplit=1)[1] if len(args) > 1 else None
    if new_text is None:
        return f"Editing #{args[0]}: {task.text!r}. Type the new text, /save or /cancel."

    todos.update_draft(new_text)
    return _commit(state)


def cmd_draft(state: AppState, args: list[str], rest: str) -> str:
    if not state.todos.update_draft(rest):
        return "Not editing anything. Use /edit N first."
    return f"Draft: {rest!r}. /save to apply, /cancel to discard."


def _commit(state: AppState) -> str:
    todos = state.todos
    session = todos.edit_session
    if session is None:
        return "Not editing anything. Use /edit N first."
    if todos.commit_edit():
        task = todos.get(session.target_id)
        return f"Saved: {task.text if task else session.draft_text.strip()}"
    if not session.draft_text.strip():
        return "Empty text, edit discarded."
    return "No changes."


def cmd_save(state: AppState, args: list[str], rest: str) -> str:
    return _commit(state)


def cmd_cancel(state: AppState, args: list[str], rest: str) -> str:
    if not state.todos.cancel_edit():
        return "Not editing anything."
    return "Edit cancelled."


def cmd_clear(state: AppState, args: list[str], rest: str) -> str:
    removed = state.todos.clear_completed()
    if not removed:
        return "Nothing to clear (no completed tasks)."
    return f"Cleared {removed} completed task{'s' if removed != 1 else ''}."


def cmd_stats(state: AppState, args: list[str], rest: str) -> str:
    return render_stats(state.todos, color=_color(state))


def cmd_reset(state: AppState, args: list[str], rest: str) -> str:
    """
    /reset      -> explain
    /reset yes  -> delete every task and wipe the stored snapshot
    """
    if not args or args[0].lower() != "yes":
        return "This deletes ALL tasks. Type /reset yes to confirm."

    todos = state.todos
    todos.cancel_edit()
    for task in todos.tasks:
        todos.remove(task.id)
    state.task_store.clear()
    logger.info("Storage reset by user.")
    return "All tasks deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls", "l"])
registry.register("add", cmd_add, help_text="Add a task: /add buy milk.", aliases=["a"])
registry.register("done", cmd_done, help_text="Toggle completed: /done N.", aliases=["x", "toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm N.", aliases=["del", "delete"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit N [new text].", aliases=["e"])
registry.register("draft", cmd_draft, help_text="Replace the edit draft without saving.")
registry.register("save", cmd_save, help_text="Save the current edit.")
registry.register("cancel", cmd_cancel, help_text="Discard the current edit.", aliases=["esc"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("stats", cmd_stats, help_text="Show total/active/completed counts.")
registry.register("reset", cmd_reset, help_text="Delete every task: /reset yes.")
