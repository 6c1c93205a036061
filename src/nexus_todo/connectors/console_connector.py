# src/nexus_todo/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import cmd_add, cmd_list, cmd_save
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

PROMPT = ">>> "
EDIT_PROMPT = "edit> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%H:%M:%S")


def handle_input(state: AppState, line: str) -> str | None:
    """
    Route one line of console input.

    - "/cmd ..."            -> slash command
    - plain text, editing   -> replace the draft and save (Enter in the edit box)
    - blank line, editing   -> save an empty draft, i.e. discard the edit
    - plain text otherwise  -> add a task
    """
    stripped = line.strip()
    if stripped.startswith("/"):
        return command_registry.handle(state, stripped)

    todos = state.todos
    if todos.edit_session is not None:
        todos.update_draft(line)
        return cmd_save(state, [], "")

    if not stripped:
        return None
    return cmd_add(state, stripped.split(), stripped)


async def run_console(state: AppState) -> None:
    """
    Interactive loop. Must run inside the event loop the controller uses as
    its scheduler: input() is awaited in a worker thread so the delayed
    add() commit fires on the loop between keystrokes.
    """
    todos = state.todos
    logger.info("Console started (tasks=%d).", todos.total_count())

    def on_added(task: Task) -> None:
        print(f"\r[{_ts_local()}] Added: {task.text}\n{PROMPT}", end="", flush=True)

    todos.add_listener(on_added)

    print(cmd_list(state, [], ""))
    print("\nType a task to add it. Use /help for commands, /exit to quit.\n")

    while True:
        prompt = EDIT_PROMPT if todos.edit_session is not None else PROMPT
        try:
            line = await asyncio.to_thread(input, prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break

        if line.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_input(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(f"[{_ts_local()}] {reply}")

    # A scheduled add always commits; let it land before shutdown.
    while todos.is_adding:
        await asyncio.sleep(0.05)

    logger.info("Console finished.")
