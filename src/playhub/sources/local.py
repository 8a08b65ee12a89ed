"""Songs stored on the device."""

from __future__ import annotations

from typing import ClassVar

from playhub.domain.model import Song, SourceKind

from .base import PlaybackSource
from .catalog import InMemoryCatalog

LOCAL_LIBRARY: tuple[Song, ...] = (
    Song.local(
        id="local-1",
        title="Local Song 1",
        artist="Local Artist",
        album="Local Album",
        duration_seconds=180,
        local_path="/path/to/local/song1.mp3",
    ),
    Song.local(
        id="local-2",
        title="Local Song 2",
        artist="Local Artist",
        album="Local Album",
        duration_seconds=240,
        local_path="/path/to/local/song2.mp3",
    ),
)


def _placeholder(song_id: str) -> Song:
    return Song.local(
        id=song_id,
        title="Local Song",
        artist="Local Artist",
        album="Local Album",
        duration_seconds=180,
        local_path="/path/to/local/song.mp3",
    )


class LocalSource(PlaybackSource):
    kind: ClassVar[SourceKind] = SourceKind.LOCAL
    display_name: ClassVar[str] = "Local Files"

    @classmethod
    def default_catalog(cls) -> InMemoryCatalog:
        return InMemoryCatalog(LOCAL_LIBRARY, placeholder=_placeholder)
