"""Discogs-backed streaming source (mock catalog)."""

from __future__ import annotations

from typing import ClassVar

from playhub.domain.model import Song, SourceKind

from .base import PlaybackSource
from .catalog import InMemoryCatalog

DISCOGS_SAMPLES: tuple[Song, ...] = (
    Song.streaming(
        id="discogs-1",
        title="Sample Track 1",
        artist="Sample Artist",
        album="Sample Album",
        duration_seconds=180,
        stream_url="https://example.com/sample1.mp3",
        source=SourceKind.DISCOGS,
    ),
    Song.streaming(
        id="discogs-2",
        title="Sample Track 2",
        artist="Sample Artist",
        album="Sample Album",
        duration_seconds=240,
        stream_url="https://example.com/sample2.mp3",
        source=SourceKind.DISCOGS,
    ),
)


def _placeholder(song_id: str) -> Song:
    return Song.streaming(
        id=song_id,
        title="Sample Track",
        artist="Sample Artist",
        album="Sample Album",
        duration_seconds=180,
        stream_url="https://example.com/sample.mp3",
        source=SourceKind.DISCOGS,
    )


class DiscogsSource(PlaybackSource):
    kind: ClassVar[SourceKind] = SourceKind.DISCOGS
    display_name: ClassVar[str] = "Discogs"

    @classmethod
    def default_catalog(cls) -> InMemoryCatalog:
        return InMemoryCatalog(DISCOGS_SAMPLES, placeholder=_placeholder)
