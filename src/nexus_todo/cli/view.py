# src/nexus_todo/cli/view.py

"""Plain-text rendering of the task list for the console."""

from __future__ import annotations

from ..tasks.task_list import TaskListController
from ..tasks.task_models import Task

_RESET = "\033[0m"
_BOLD = "1"
_DIM = "2"
_CYAN = "36"
_GREEN = "32"
_MAGENTA = "35"
_YELLOW = "33"


def _c(text: str, code: str, enabled: bool) -> str:
    return f"\033[{code}m{text}{_RESET}" if enabled else text


def format_task_line(position: int, task: Task, *, color: bool = False) -> str:
    mark = "[x]" if task.completed else "[ ]"
    day = task.created_at.astimezone().strftime("%Y-%m-%d")
    text = _c(task.text, _DIM, color) if task.completed else task.text
    mark = _c(mark, _GREEN, color) if task.completed else mark
    return f"{position:>3}. {mark} {text}  {_c(f'({day})', _DIM, color)}"


def render_stats(todos: TaskListController, *, color: bool = False) -> str:
    return (
        f"Total: {_c(str(todos.total_count()), _CYAN, color)}  "
        f"Active: {_c(str(todos.active_count()), _MAGENTA, color)}  "
        f"Completed: {_c(str(todos.completed_count()), _GREEN, color)}"
    )


def render_task_list(todos: TaskListController, *, title: str = "NEXUS TODO", color: bool = False) -> str:
    lines = [_c(title, _BOLD, color), render_stats(todos, color=color), "-" * 40]

    tasks = todos.tasks
    session = todos.edit_session
    if not tasks:
        lines.append("No tasks yet. Type something to add your first task.")

    for i, task in enumerate(tasks, start=1):
        lines.append(format_task_line(i, task, color=color))
        if session is not None and session.target_id == task.id:
            draft = _c(repr(session.draft_text), _YELLOW, color)
            lines.append(f"       editing: {draft}  (type new text, /save or /cancel)")

    if todos.is_adding:
        lines.append(_c("  adding...", _CYAN, color))

    done = todos.completed_count()
    if done:
        lines.append(f"/clear removes {done} completed task{'s' if done != 1 else ''}.")

    return "\n".join(lines)
