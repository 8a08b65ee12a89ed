"""Playback domain model."""

from __future__ import annotations

from .enums import PlaybackStatus, SourceKind
from .playback import PlaybackProgress, PlaybackState
from .song import Song

__all__ = [
    "PlaybackProgress",
    "PlaybackState",
    "PlaybackStatus",
    "Song",
    "SourceKind",
]
