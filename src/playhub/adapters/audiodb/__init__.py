"""TheAudioDB catalog adapter."""

from __future__ import annotations

from .client import AudioDbCatalog, decode_tracks_response
from .schema import AudioDbTrack, AudioDbTracksResponse
from .translator import translate_track

__all__ = [
    "AudioDbCatalog",
    "AudioDbTrack",
    "AudioDbTracksResponse",
    "decode_tracks_response",
    "translate_track",
]
