"""Shared transport and progress-clock behaviour for every playback source."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from playhub.config.playback import PlaybackSettings
from playhub.domain.clock import ProgressClock
from playhub.domain.errors import DisposedError
from playhub.domain.model import PlaybackProgress, PlaybackState, PlaybackStatus
from playhub.domain.observable import Observable

if TYPE_CHECKING:
    from types import TracebackType

    from playhub.domain.model import Song, SourceKind
    from playhub.domain.ports.catalog import SongCatalog

log = getLogger(__name__)


class PlaybackSource(ABC):
    """One source kind's playback capability set.

    A source owns a ``(current_song, state, progress)`` triple, published through three
    replaying observables, and a :class:`ProgressClock` that advances ``progress`` by
    one second per tick while playing. Transport calls and ticks run under one
    ``asyncio.Lock`` so a tick can never interleave with a stop. Catalog lookups use a
    separate lock and never block transport.
    """

    kind: ClassVar[SourceKind]
    display_name: ClassVar[str]

    def __init__(
        self,
        *,
        catalog: SongCatalog | None = None,
        settings: PlaybackSettings | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else self.default_catalog()
        self._settings = settings or PlaybackSettings()
        self._lock = asyncio.Lock()
        self._catalog_lock = asyncio.Lock()
        self._closed = False
        self._clock = ProgressClock(
            self._tick, interval=self._settings.tick_seconds, name=f"{self.kind}-clock"
        )
        self.state: Observable[PlaybackState] = Observable(
            PlaybackState.STOPPED, name=f"{self.kind}.state"
        )
        self.progress: Observable[PlaybackProgress] = Observable(
            PlaybackProgress(), name=f"{self.kind}.progress"
        )
        self.current_song: Observable[Song | None] = Observable(
            None, name=f"{self.kind}.current_song"
        )

    @classmethod
    @abstractmethod
    def default_catalog(cls) -> SongCatalog:
        """Catalog used when none is injected."""

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def catalog(self) -> SongCatalog:
        return self._catalog

    # Catalog

    async def search(self, query: str) -> list[Song]:
        self._ensure_open()
        async with self._catalog_lock:
            songs = await self._catalog.search(query)
        log.debug("%s search %r returned %d songs", self.display_name, query, len(songs))
        return songs

    async def fetch_details(self, song_id: str) -> Song:
        self._ensure_open()
        async with self._catalog_lock:
            return await self._catalog.fetch_details(song_id)

    # Transport

    async def prepare_playback(self, song: Song) -> None:
        async with self._lock:
            self._ensure_open()
            self._clock.stop()
            self.current_song.emit(song)
            self.progress.emit(PlaybackProgress(0.0, song.duration_seconds))
            self.state.emit(PlaybackState.LOADING)
            log.debug("%s loading %s", self.display_name, song.id)
            delay = self._settings.buffering_delay(self.kind)
            if delay > 0:
                await asyncio.sleep(delay)

    async def start_playback(self) -> None:
        async with self._lock:
            self._ensure_open()
            self.state.emit(PlaybackState.PLAYING)
            self._clock.start()

    async def pause_playback(self) -> None:
        async with self._lock:
            self._ensure_open()
            self._clock.stop()
            self.state.emit(PlaybackState.PAUSED)

    async def stop_playback(self) -> None:
        async with self._lock:
            self._ensure_open()
            self._stop()

    async def seek(self, time_seconds: float) -> None:
        """Jump to ``time_seconds`` without changing state, clamped to the song length."""

        async with self._lock:
            self._ensure_open()
            duration = self._duration()
            target = min(max(time_seconds, 0.0), duration)
            if target != time_seconds:
                log.debug("%s clamped seek %.1f to %.1f", self.display_name, time_seconds, target)
            self.progress.emit(PlaybackProgress(target, duration))

    # Lifecycle

    async def aclose(self) -> None:
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            self._stop()
        await self._clock.aclose()
        await self._catalog.aclose()
        log.debug("%s closed", self.display_name)

    async def __aenter__(self) -> PlaybackSource:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # Internals

    async def _tick(self) -> bool:
        async with self._lock:
            if self._closed or self.state.value.status is not PlaybackStatus.PLAYING:
                return False
            song = self.current_song.value
            if song is None:
                return False
            elapsed = self.progress.value.current_time_seconds + 1.0
            self.progress.emit(PlaybackProgress(elapsed, song.duration_seconds))
            if elapsed >= song.duration_seconds:
                log.debug("%s reached the end of %s", self.display_name, song.id)
                self._stop()
                return False
            return True

    def _stop(self) -> None:
        # Caller holds self._lock.
        self._clock.stop()
        self.state.emit(PlaybackState.STOPPED)
        self.progress.emit(PlaybackProgress(0.0, self._duration()))

    def _duration(self) -> float:
        song = self.current_song.value
        return song.duration_seconds if song is not None else 0.0

    def _ensure_open(self) -> None:
        if self._closed:
            raise DisposedError(self.display_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self.state.value}, song={self.current_song.value!r})"
