"""Spotify streaming source.

Uses the Spotify Web API catalog when client credentials are configured and a fixed
sample catalog otherwise.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from playhub.adapters.spotify import SpotifyCatalog
from playhub.config.spotify import find_spotify_config
from playhub.domain.model import Song, SourceKind

from .base import PlaybackSource
from .catalog import InMemoryCatalog

if TYPE_CHECKING:
    from playhub.domain.ports.catalog import SongCatalog

log = getLogger(__name__)


def _sample(
    song_id: str,
    title: str,
    artist: str,
    album: str,
    duration_seconds: float,
    artwork: str = "spotify-artwork",
) -> Song:
    return Song.streaming(
        id=song_id,
        title=title,
        artist=artist,
        album=album,
        duration_seconds=duration_seconds,
        stream_url=f"https://open.spotify.com/track/{song_id}",
        artwork_url=f"https://example.com/{artwork}.jpg",
        source=SourceKind.SPOTIFY,
    )


SPOTIFY_SAMPLES: tuple[Song, ...] = (
    _sample("spotify-1", "Spotify Song 1", "Spotify Artist", "Spotify Album", 200, "spotify-artwork1"),
    _sample("spotify-2", "Spotify Song 2", "Spotify Artist", "Spotify Album", 180, "spotify-artwork2"),
    _sample("spotify-3", "Popular Track", "Famous Artist", "Hit Album", 220, "spotify-artwork3"),
)


def _placeholder(song_id: str) -> Song:
    return _sample(song_id, "Spotify Track", "Spotify Artist", "Spotify Album", 180)


class SpotifySource(PlaybackSource):
    kind: ClassVar[SourceKind] = SourceKind.SPOTIFY
    display_name: ClassVar[str] = "Spotify"

    @classmethod
    def default_catalog(cls) -> SongCatalog:
        config = find_spotify_config()
        if config is None:
            log.info("Spotify credentials not configured; using the sample catalog")
            return InMemoryCatalog(SPOTIFY_SAMPLES, placeholder=_placeholder)
        return SpotifyCatalog(config=config)
