# src/nexus_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, then builds AppState inside a running asyncio loop
(the loop is the scheduler for delayed adds) and runs the console.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        kv = getattr(state, "kv", None)
        if kv is not None and hasattr(kv, "close"):
            kv.close()
    except Exception:
        logger.debug("KV store close failed.", exc_info=True)


async def _run(settings: Settings) -> None:
    state = create_initial_state(scheduler=asyncio.get_running_loop(), settings=settings)
    try:
        await run_console(state)
    finally:
        # Ctrl+C tears the loop down before a scheduled add fires.
        state.todos.flush_pending_add()
        _shutdown(state)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logger.info("Starting %s (log=%s)...", settings.app_name, log_file)

    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
        print()

    logger.info("Bye.")


if __name__ == "__main__":
    main()
