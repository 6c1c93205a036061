# src/nexus_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite key-value store, the TaskStore adapter and the
  TaskListController into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import DelayScheduler
from ..core.state import AppState
from ..storage.kv_store import SqliteKeyValueStore
from ..tasks.task_list import TaskListController
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, scheduler: DelayScheduler, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    `scheduler` runs the delayed add() commit; pass the running asyncio loop.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv = SqliteKeyValueStore(settings.store_path)
    task_store = TaskStore(kv, key=settings.storage_key)
    todos = TaskListController(
        task_store,
        scheduler=scheduler,
        add_delay=max(0, int(settings.add_delay_ms)) / 1000.0,
    )

    logger.info(
        "State ready store=%s key=%s tasks=%d",
        settings.store_path,
        settings.storage_key,
        todos.total_count(),
    )
    return AppState(settings=settings, kv=kv, task_store=task_store, todos=todos)
