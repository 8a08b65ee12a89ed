"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import SongCatalog
from .persistence import PlaylistStore
from .session import SessionEvent, SessionHandler, SessionSignals

__all__ = [
    "PlaylistStore",
    "SessionEvent",
    "SessionHandler",
    "SessionSignals",
    "SongCatalog",
]
