# src/nexus_todo/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

TaskId = int | str


class InvalidTaskRecord(ValueError):
    """A stored record that cannot be turned into a Task."""


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a 'Z' suffix."""
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidTaskRecord(f"createdAt must be an ISO-8601 string, got {raw!r}")
    try:
        dt = datetime.fromisoformat(raw.strip())
    except ValueError as e:
        raise InvalidTaskRecord(f"createdAt is not ISO-8601: {raw!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    try:
        return dt.astimezone(UTC)
    except (OverflowError, ValueError) as e:
        raise InvalidTaskRecord(f"createdAt is out of range: {raw!r}") from e


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Instances are immutable; the controller replaces them on toggle/edit.
    `created_at` is display-only and never used for ordering.
    """

    id: TaskId
    text: str
    created_at: datetime
    completed: bool = False

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        if not isinstance(raw, Mapping):
            raise InvalidTaskRecord(f"record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is an int subclass; a stored true/false is not an id.
        if isinstance(task_id, bool) or not isinstance(task_id, (int, str)):
            raise InvalidTaskRecord(f"id must be a number or string, got {task_id!r}")
        if isinstance(task_id, str) and not task_id.strip():
            raise InvalidTaskRecord("id must not be empty")

        text = raw.get("text")
        if not isinstance(text, str) or not text.strip():
            raise InvalidTaskRecord(f"text must be a non-empty string (id={task_id!r})")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise InvalidTaskRecord(f"completed must be a boolean (id={task_id!r})")

        return cls(
            id=task_id,
            text=text.strip(),
            completed=completed,
            created_at=parse_timestamp(raw.get("createdAt")),
        )


@dataclass(frozen=True, slots=True)
class EditSession:
    """Which task is being edited and its unsaved draft."""

    target_id: TaskId
    draft_text: str
