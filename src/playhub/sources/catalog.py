"""Fixed in-memory catalogs for the local and mock sources."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playhub.domain.model import Song

type PlaceholderFactory = Callable[[str], Song]


class InMemoryCatalog:
    """Filters a fixed song list; unknown ids resolve through ``placeholder``.

    An empty query matches every song, since every field contains the empty string.
    """

    def __init__(self, songs: Iterable[Song], *, placeholder: PlaceholderFactory) -> None:
        self._songs = tuple(songs)
        self._by_id = {song.id: song for song in self._songs}
        self._placeholder = placeholder

    @property
    def songs(self) -> tuple[Song, ...]:
        return self._songs

    async def search(self, query: str) -> list[Song]:
        return [song for song in self._songs if song.matches(query)]

    async def fetch_details(self, song_id: str) -> Song:
        song = self._by_id.get(song_id)
        if song is not None:
            return song
        return self._placeholder(song_id)

    async def aclose(self) -> None:
        return None
