"""Ordered play queue with a cursor."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .formatting import format_time
from .observable import Observable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import Song
    from .ports.persistence import PlaylistStore

log = getLogger(__name__)


class PlaylistManager:
    """Songs in play order plus ``current_index``.

    Invariant: ``0 <= current_index < len(songs)`` whenever the playlist is not empty,
    and ``current_index == 0`` when it is. Out-of-range indices are ignored rather
    than raised, so callers never need to clamp.

    ``current_song`` publishes only when the song under the cursor changes (compared
    by id); ``songs`` publishes a snapshot after every mutation.
    """

    def __init__(self, songs: Iterable[Song] = ()) -> None:
        self._songs: list[Song] = list(songs)
        self._current_index = 0
        self.songs: Observable[tuple[Song, ...]] = Observable(
            tuple(self._songs), name="playlist.songs"
        )
        self.current_song: Observable[Song | None] = Observable(
            self._current(), name="playlist.current_song", distinct=True
        )

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def song_count(self) -> int:
        return len(self._songs)

    @property
    def is_empty(self) -> bool:
        return not self._songs

    @property
    def has_next(self) -> bool:
        return bool(self._songs)

    @property
    def has_previous(self) -> bool:
        return bool(self._songs)

    @property
    def total_duration(self) -> float:
        return sum(song.duration_seconds for song in self._songs)

    @property
    def formatted_total_duration(self) -> str:
        return format_time(self.total_duration)

    def __len__(self) -> int:
        return len(self._songs)

    def __getitem__(self, index: int) -> Song:
        return self._songs[index]

    def snapshot(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    # Mutation

    def add(self, song: Song) -> None:
        self._songs.append(song)
        self._publish()

    def add_all(self, songs: Iterable[Song]) -> None:
        self._songs.extend(songs)
        self._publish()

    def remove(self, index: int) -> Song | None:
        if not self._in_range(index):
            return None
        removed = self._songs.pop(index)
        if index <= self._current_index and self._current_index > 0:
            self._current_index -= 1
        self._publish()
        return removed

    def move(self, from_index: int, to_index: int) -> None:
        if not (self._in_range(from_index) and self._in_range(to_index)):
            return
        song = self._songs.pop(from_index)
        self._songs.insert(to_index, song)

        cursor = self._current_index
        if from_index == cursor:
            self._current_index = to_index
        elif from_index < cursor <= to_index:
            self._current_index = cursor - 1
        elif to_index <= cursor < from_index:
            self._current_index = cursor + 1
        self._publish()

    def clear(self) -> None:
        self._songs.clear()
        self._current_index = 0
        self._publish()

    def replace(self, songs: Iterable[Song]) -> None:
        self._songs = list(songs)
        self._current_index = 0
        self._publish()

    # Navigation

    def next(self) -> Song | None:
        if not self._songs:
            return None
        self._current_index = (self._current_index + 1) % len(self._songs)
        self._publish()
        return self._current()

    def previous(self) -> Song | None:
        if not self._songs:
            return None
        self._current_index = (self._current_index - 1) % len(self._songs)
        self._publish()
        return self._current()

    def select(self, song: Song) -> Song | None:
        for index, candidate in enumerate(self._songs):
            if candidate == song:
                return self.select_index(index)
        return None

    def select_index(self, index: int) -> Song | None:
        if not self._in_range(index):
            return None
        self._current_index = index
        self._publish()
        return self._current()

    # Persistence hooks

    def load_from(self, store: PlaylistStore) -> None:
        songs = store.load_playlist()
        log.info("Loaded playlist with %d songs", len(songs))
        self.replace(songs)

    def save_to(self, store: PlaylistStore) -> None:
        store.save_playlist(self.snapshot())
        log.info("Saved playlist with %d songs", len(self._songs))

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._songs)

    def _current(self) -> Song | None:
        if self._in_range(self._current_index):
            return self._songs[self._current_index]
        return None

    def _publish(self) -> None:
        self.songs.emit(tuple(self._songs))
        self.current_song.emit(self._current())
