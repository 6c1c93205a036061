# src/nexus_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list depends on Protocols instead of concrete implementations.
This keeps storage and timers swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """String key -> string value storage. Values are always replaced whole."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class DelayScheduler(Protocol):
    """
    Runs a callback once after `delay` seconds on the caller's event loop.

    asyncio.AbstractEventLoop already satisfies this port.
    """

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Any: ...


Clock = Callable[[], float]
# Returns seconds since the epoch (time.time-compatible).
