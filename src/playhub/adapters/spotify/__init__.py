"""Spotify catalog adapter."""

from __future__ import annotations

from .client import SpotifyCatalog
from .schema import SpotifyAlbum, SpotifyArtist, SpotifySearchResponse, SpotifyTrack
from .translator import translate_track

__all__ = [
    "SpotifyAlbum",
    "SpotifyArtist",
    "SpotifyCatalog",
    "SpotifySearchResponse",
    "SpotifyTrack",
    "translate_track",
]
