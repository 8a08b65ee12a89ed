"""Playlist persistence adapters."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from playhub.domain.errors import DecodeError
from playhub.domain.model import Song

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

log = getLogger(__name__)

_SONGS = TypeAdapter(list[Song])


class JsonPlaylistStore:
    """Stores the playlist as a JSON array of songs; a missing file is an empty playlist."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load_playlist(self) -> list[Song]:
        if not self._path.exists():
            log.info("No saved playlist at %s", self._path)
            return []
        try:
            return _SONGS.validate_json(self._path.read_bytes())
        except ValidationError as exc:
            raise DecodeError(f"Corrupt playlist file {self._path}: {exc}") from exc

    def save_playlist(self, songs: Sequence[Song]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_bytes(_SONGS.dump_json(list(songs), indent=2))
        tmp_path.replace(self._path)


class InMemoryPlaylistStore:
    def __init__(self, songs: Sequence[Song] = ()) -> None:
        self._songs = list(songs)

    def load_playlist(self) -> list[Song]:
        return list(self._songs)

    def save_playlist(self, songs: Sequence[Song]) -> None:
        self._songs = list(songs)
