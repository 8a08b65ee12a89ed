"""Playback sources, one per source kind."""

from __future__ import annotations

from .audiodb import AudioDbSource
from .base import PlaybackSource
from .catalog import InMemoryCatalog
from .discogs import DiscogsSource
from .factory import SOURCE_TYPES, create_source, create_sources
from .local import LocalSource
from .spotify import SpotifySource

__all__ = [
    "SOURCE_TYPES",
    "AudioDbSource",
    "DiscogsSource",
    "InMemoryCatalog",
    "LocalSource",
    "PlaybackSource",
    "SpotifySource",
    "create_source",
    "create_sources",
]
