"""Application wiring entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from playhub.adapters.playlist_store import JsonPlaylistStore
from playhub.adapters.session import SessionSignalBridge
from playhub.config.playback import get_playback_settings
from playhub.config.storage import get_storage_config
from playhub.domain.coordinator import PlaybackCoordinator
from playhub.domain.model import Song, SourceKind
from playhub.domain.playlist import PlaylistManager
from playhub.sources.factory import create_sources

if TYPE_CHECKING:
    from collections.abc import Mapping

    from playhub.config.playback import PlaybackSettings
    from playhub.domain.ports.persistence import PlaylistStore
    from playhub.domain.ports.session import SessionSignals
    from playhub.sources.base import PlaybackSource

log = getLogger(__name__)


def sample_playlist() -> list[Song]:
    """Demo playlist mixing Spotify, local and AudioDB songs."""

    return [
        _spotify_sample(
            "sample-1", "Bohemian Rhapsody", "Queen", "A Night at the Opera", 354, "bohemian"
        ),
        _spotify_sample("sample-2", "Hotel California", "Eagles", "Hotel California", 391, "hotel"),
        _spotify_sample(
            "sample-3", "Stairway to Heaven", "Led Zeppelin", "Led Zeppelin IV", 482, "stairway"
        ),
        Song.local(
            id="local-1",
            title="Local Song 1",
            artist="Local Artist",
            album="Local Album",
            duration_seconds=180,
            local_path="/path/to/local/song1.mp3",
        ),
        Song.streaming(
            id="audiodb-1",
            title="AudioDB Track",
            artist="AudioDB Artist",
            album="AudioDB Album",
            duration_seconds=200,
            stream_url="https://example.com/audiodb.mp3",
            source=SourceKind.AUDIODB,
        ),
    ]


def _spotify_sample(
    song_id: str, title: str, artist: str, album: str, duration: float, slug: str
) -> Song:
    return Song.streaming(
        id=song_id,
        title=title,
        artist=artist,
        album=album,
        duration_seconds=duration,
        stream_url=f"https://example.com/{slug}.mp3",
        source=SourceKind.SPOTIFY,
    )


def default_playlist_store() -> JsonPlaylistStore:
    return JsonPlaylistStore(get_storage_config().playlist_path())


def build_coordinator(
    *,
    settings: PlaybackSettings | None = None,
    sources: Mapping[SourceKind, PlaybackSource] | None = None,
    playlist: PlaylistManager | None = None,
    session: SessionSignals | None = None,
    store: PlaylistStore | None = None,
    default_source: SourceKind = SourceKind.LOCAL,
) -> PlaybackCoordinator:
    """Assemble the process-wide coordinator.

    Missing collaborators fall back to environment-driven defaults: one provider per
    source kind, an empty playlist (or the contents of ``store``) and an in-process
    session bridge. Loading from ``store`` does not start playback.
    """

    effective_sources = sources if sources is not None else create_sources(
        settings=settings or get_playback_settings()
    )
    effective_playlist = playlist if playlist is not None else PlaylistManager()
    if store is not None:
        effective_playlist.load_from(store)

    coordinator = PlaybackCoordinator(
        effective_sources,
        playlist=effective_playlist,
        default_source=default_source,
    )
    coordinator.attach_session(session if session is not None else SessionSignalBridge())
    log.info(
        "Coordinator ready: sources=%s, playlist=%d songs",
        ", ".join(str(kind) for kind in effective_sources),
        effective_playlist.song_count,
    )
    return coordinator
