# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from nexus_todo.core.state import AppState
from nexus_todo.tasks.task_list import TaskListController
from nexus_todo.tasks.task_store import TaskStore

from .fakes import InMemoryKeyValueStore, ManualScheduler, SteppingClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="nexus-todo",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        store_path=tmp_path / "data" / "store.sqlite3",
        storage_key="todos",
        add_delay_ms=300,
        console_color=False,
    )


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def store(kv: InMemoryKeyValueStore) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture()
def todos(store: TaskStore, scheduler: ManualScheduler, clock: SteppingClock) -> TaskListController:
    return TaskListController(store, scheduler=scheduler, add_delay=0.3, clock=clock)


@pytest.fixture()
def add_now(todos: TaskListController, scheduler: ManualScheduler):
    """add() and let the delay elapse; returns the committed task."""

    def _add(text: str):
        assert todos.add(text)
        scheduler.run_all()
        return todos.tasks[0]

    return _add


@pytest.fixture()
def state(settings, kv, store, todos) -> AppState:
    return AppState(settings=settings, kv=kv, task_store=store, todos=todos)
