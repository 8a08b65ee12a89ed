"""Translate Spotify payloads into songs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playhub.domain.model import Song, SourceKind

if TYPE_CHECKING:
    from .schema import SpotifyTrack

OPEN_SPOTIFY_TRACK_URL = "https://open.spotify.com/track/{id}"


def translate_track(track: SpotifyTrack) -> Song:
    artist = ", ".join(artist.name for artist in track.artists) or "Unknown"
    artwork_url = track.album.images[0].url if track.album.images else None
    stream_url = track.external_urls.get("spotify") or OPEN_SPOTIFY_TRACK_URL.format(id=track.id)
    return Song.streaming(
        id=track.id,
        title=track.name,
        artist=artist,
        album=track.album.name,
        duration_seconds=(track.duration_ms or 0) / 1000,
        stream_url=stream_url,
        artwork_url=artwork_url,
        source=SourceKind.SPOTIFY,
    )
