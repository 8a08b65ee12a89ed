"""Translate TheAudioDB payloads into songs."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from playhub.domain.model import Song, SourceKind

if TYPE_CHECKING:
    from .schema import AudioDbTrack

UNKNOWN = "Unknown"


def translate_track(track: AudioDbTrack) -> Song:
    """Build a song, defaulting missing text to ``"Unknown"`` and duration to 0."""

    return Song.streaming(
        id=track.id or str(uuid4()),
        title=track.title or UNKNOWN,
        artist=track.artist or UNKNOWN,
        album=track.album or UNKNOWN,
        duration_seconds=parse_duration(track.duration),
        stream_url=track.video_url,
        artwork_url=track.thumbnail_url,
        source=SourceKind.AUDIODB,
    )


def parse_duration(value: str | None) -> float:
    """Whole seconds from the string-encoded ``intDuration``; junk or negatives give 0."""

    if value is None:
        return 0.0
    try:
        seconds = int(value)
    except ValueError:
        return 0.0
    return float(max(seconds, 0))
