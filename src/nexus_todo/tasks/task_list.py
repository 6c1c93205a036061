# src/nexus_todo/tasks/task_list.py

from __future__ import annotations

"""
Task list controller.

Owns the authoritative in-memory collection (newest first) and the
single-slot edit session. Every mutation goes through this class and,
once committed, the whole collection is pushed to the TaskStore.

The only asynchronous step is add(): the new task becomes visible after a
short fixed delay scheduled on the injected DelayScheduler. While that
delay is pending the controller is "adding" and further add() calls are
ignored.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from ..core.ports import Clock, DelayScheduler
from .task_models import EditSession, Task, TaskId
from .task_store import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_ADD_DELAY_SECONDS = 0.3

CommitListener = Callable[[Task], None]


class TaskListController:
    def __init__(
        self,
        store: TaskStore,
        *,
        scheduler: DelayScheduler,
        add_delay: float = DEFAULT_ADD_DELAY_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._add_delay = max(0.0, float(add_delay))
        self._clock: Clock = clock or time.time

        self._tasks: list[Task] = list(store.load())
        self._edit: EditSession | None = None
        self._adding = False
        self._pending_handle: Any = None
        self._pending_task: Task | None = None
        self._listeners: list[CommitListener] = []

        # Ids are never reused: start above every numeric id already stored.
        self._last_id = max(
            (t.id for t in self._tasks if isinstance(t.id, int)),
            default=0,
        )
        logger.debug("TaskListController ready tasks=%d last_id=%s", len(self._tasks), self._last_id)

    # ---- read-only views ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def is_adding(self) -> bool:
        return self._adding

    @property
    def edit_session(self) -> EditSession | None:
        return self._edit

    def get(self, task_id: TaskId) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def active_count(self) -> int:
        return sum(1 for t in self._tasks if not t.completed)

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def total_count(self) -> int:
        return len(self._tasks)

    def add_listener(self, listener: CommitListener) -> None:
        """Call `listener(task)` each time a delayed add() commits."""
        self._listeners.append(listener)

    # ---- mutations ----

    def add(self, raw_text: str) -> bool:
        """
        Schedule a new task built from `raw_text`.

        Returns True if accepted. Blank text and calls made while a
        previous add is still pending are ignored (False).
        """
        text = (raw_text or "").strip()
        if not text:
            logger.debug("add ignored: blank text")
            return False
        if self._adding:
            logger.debug("add ignored: another add is pending")
            return False

        now = self._clock()
        created_at = datetime.fromtimestamp(now, UTC)
        # Stored timestamps carry milliseconds; keep memory and snapshot equal.
        created_at = created_at.replace(microsecond=created_at.microsecond // 1000 * 1000)
        task = Task(
            id=self._allocate_id(now),
            text=text,
            completed=False,
            created_at=created_at,
        )
        self._adding = True
        self._pending_task = task
        self._pending_handle = self._scheduler.call_later(self._add_delay, self._commit_add, task)
        logger.debug("add scheduled id=%s delay=%.3fs", task.id, self._add_delay)
        return True

    def toggle(self, task_id: TaskId) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle ignored: unknown id=%s", task_id)
            return False
        task = self._tasks[idx]
        self._tasks[idx] = replace(task, completed=not task.completed)
        logger.debug("toggle id=%s completed=%s", task_id, not task.completed)
        self._persist()
        return True

    def remove(self, task_id: TaskId) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("remove ignored: unknown id=%s", task_id)
            return False
        del self._tasks[idx]
        if self._edit is not None and self._edit.target_id == task_id:
            logger.debug("remove closes edit session on id=%s", task_id)
            self._edit = None
        logger.debug("remove id=%s", task_id)
        self._persist()
        return True

    def clear_completed(self) -> int:
        """Drop every completed task at once. Returns how many were removed."""
        remaining = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(remaining)
        if not removed:
            return 0
        self._tasks = remaining
        if self._edit is not None and self._index_of(self._edit.target_id) is None:
            logger.debug("clear_completed closes edit session on id=%s", self._edit.target_id)
            self._edit = None
        logger.debug("clear_completed removed=%d", removed)
        self._persist()
        return removed

    # ---- edit session ----

    def begin_edit(self, task_id: TaskId, current_text: str) -> bool:
        if self._index_of(task_id) is None:
            logger.debug("begin_edit ignored: unknown id=%s", task_id)
            return False
        if self._edit is not None:
            logger.debug("begin_edit abandons draft for id=%s", self._edit.target_id)
        self._edit = EditSession(target_id=task_id, draft_text=current_text)
        return True

    def update_draft(self, text: str) -> bool:
        if self._edit is None:
            return False
        self._edit = replace(self._edit, draft_text=text)
        return True

    def commit_edit(self) -> bool:
        """
        Close the edit session, applying the trimmed draft if non-empty.

        Returns True only if the task text actually changed.
        """
        session = self._edit
        if session is None:
            return False
        self._edit = None

        text = session.draft_text.strip()
        if not text:
            logger.debug("commit_edit discarded blank draft for id=%s", session.target_id)
            return False

        idx = self._index_of(session.target_id)
        if idx is None:
            logger.debug("commit_edit target gone id=%s", session.target_id)
            return False

        task = self._tasks[idx]
        if task.text == text:
            return False
        self._tasks[idx] = replace(task, text=text)
        logger.debug("commit_edit id=%s", session.target_id)
        self._persist()
        return True

    def cancel_edit(self) -> bool:
        if self._edit is None:
            return False
        logger.debug("cancel_edit id=%s", self._edit.target_id)
        self._edit = None
        return True

    # ---- shutdown ----

    def flush_pending_add(self) -> bool:
        """
        Commit a scheduled add right now instead of waiting for the timer.

        Used on shutdown: a scheduled add always commits, even when the
        event loop is torn down before its delay elapses.
        """
        task = self._pending_task
        if task is None:
            return False
        cancel = getattr(self._pending_handle, "cancel", None)
        if callable(cancel):
            cancel()
        logger.debug("add flushed id=%s", task.id)
        self._commit_add(task)
        return True

    # ---- internals ----

    def _commit_add(self, task: Task) -> None:
        # Already flushed: a scheduler that cannot cancel may still fire.
        if self._pending_task is not task:
            return
        self._tasks.insert(0, task)
        self._adding = False
        self._pending_task = None
        self._pending_handle = None
        logger.debug("add committed id=%s", task.id)
        self._persist()

        for listener in list(self._listeners):
            try:
                listener(task)
            except Exception:
                logger.exception("add listener failed id=%s", task.id)

    def _persist(self) -> None:
        self._store.save(self._tasks)

    def _index_of(self, task_id: TaskId) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _allocate_id(self, now: float) -> int:
        candidate = int(now * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate
