# src/nexus_todo/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStore
from .task_models import InvalidTaskRecord, Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"


class TaskStore:
    """
    Persists the whole task collection as one JSON array under one key.

    - load() never raises for missing or corrupt data: it returns [].
    - save() overwrites the blob unconditionally (no merge, no versioning).
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key

    def load(self) -> list[Task]:
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read key=%s; starting empty.", self._key)
            return []

        if raw is None:
            logger.info("No snapshot under key=%s; starting empty.", self._key)
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError, TypeError):
            # JSONDecodeError, oversized ints and very deep nesting all land here.
            logger.warning("Snapshot under key=%s is not valid JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Snapshot under key=%s is %s, not a list; starting empty.",
                self._key,
                type(data).__name__,
            )
            return []

        tasks: list[Task] = []
        seen: set[object] = set()
        for i, item in enumerate(data):
            try:
                task = Task.from_record(item)
            except InvalidTaskRecord as e:
                logger.warning("Skipping stored record #%d: %s", i, e)
                continue
            if task.id in seen:
                logger.warning("Skipping stored record #%d: duplicate id %r", i, task.id)
                continue
            seen.add(task.id)
            tasks.append(task)

        logger.info("Loaded %d tasks from key=%s", len(tasks), self._key)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        try:
            payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False, separators=(",", ":"))
            self._kv.set(self._key, payload)
        except Exception:
            # Best-effort: the next load() returns the previous snapshot.
            logger.exception("Failed to save snapshot under key=%s", self._key)

    def clear(self) -> None:
        try:
            self._kv.delete(self._key)
        except Exception:
            logger.exception("Failed to delete key=%s", self._key)
