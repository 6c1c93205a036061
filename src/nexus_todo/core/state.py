# src/nexus_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskListController
from ..tasks.task_store import TaskStore
from .ports import KeyValueStore


@dataclass
class AppState:
    # Settings object (nexus_todo.config.Settings or a test stand-in).
    settings: object

    kv: KeyValueStore
    task_store: TaskStore
    todos: TaskListController
