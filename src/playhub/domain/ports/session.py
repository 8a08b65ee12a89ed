"""Port for process-level audio session signals."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Protocol, runtime_checkable

type SessionHandler = Callable[[], Awaitable[None]]


class SessionEvent(StrEnum):
    INTERRUPTED = "interrupted"
    RESUMED = "resumed"


@runtime_checkable
class SessionSignals(Protocol):
    """Fire-and-forget ``interrupted``/``resumed`` notifications without payload."""

    def connect(self, event: SessionEvent, handler: SessionHandler) -> None: ...

    def disconnect(self, event: SessionEvent, handler: SessionHandler) -> None: ...


__all__ = ["SessionEvent", "SessionHandler", "SessionSignals"]
