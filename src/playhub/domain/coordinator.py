"""Process-wide playback authority.

The coordinator owns one long-lived provider per source kind, the playlist, and
mirrors of the active provider's ``state``/``progress``/``current_song`` streams.
Listeners subscribe to the mirrors; commands go through the coordinator.

Create exactly one per process (see :func:`playhub.app.build_coordinator`) and pass
it to whoever needs playback control.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from .errors import UnknownSourceError
from .model import PlaybackProgress, PlaybackState, PlaybackStatus, Song, SourceKind
from .observable import Observable, Subscription
from .playlist import PlaylistManager
from .ports.session import SessionEvent

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Mapping
    from types import TracebackType

    from playhub.sources.base import PlaybackSource

    from .ports.session import SessionSignals

log = getLogger(__name__)


class PlaybackCoordinator:
    def __init__(
        self,
        sources: Mapping[SourceKind, PlaybackSource],
        *,
        playlist: PlaylistManager | None = None,
        default_source: SourceKind = SourceKind.LOCAL,
    ) -> None:
        self._sources: dict[SourceKind, PlaybackSource] = dict(sources)
        self.playlist = playlist if playlist is not None else PlaylistManager()

        self.state: Observable[PlaybackState] = Observable(
            PlaybackState.STOPPED, name="coordinator.state"
        )
        self.progress: Observable[PlaybackProgress] = Observable(
            PlaybackProgress(), name="coordinator.progress"
        )
        self.current_song: Observable[Song | None] = Observable(
            None, name="coordinator.current_song"
        )
        self.active_source: Observable[SourceKind | None] = Observable(
            None, name="coordinator.active_source", distinct=True
        )
        self.selected_source: Observable[SourceKind] = Observable(
            default_source, name="coordinator.selected_source", distinct=True
        )

        self._active: PlaybackSource | None = None
        self._mirrors: list[Subscription] = []
        self._play_lock = asyncio.Lock()
        self._playlist_lock = asyncio.Lock()
        self._cursor_song: Song | None = None
        self._cursor_moved = False
        self._cursor_subscription = self.playlist.current_song.subscribe(
            self._on_cursor_song, replay=False
        )
        self._session: SessionSignals | None = None
        self._closed = False

    # Read access

    @property
    def sources(self) -> Mapping[SourceKind, PlaybackSource]:
        return MappingProxyType(self._sources)

    @property
    def active(self) -> PlaybackSource | None:
        return self._active

    def get_source(self, kind: SourceKind) -> PlaybackSource | None:
        return self._sources.get(kind)

    # Song routing

    async def play_song(self, song: Song) -> None:
        """Make ``song``'s provider active and start playing it.

        Raises :class:`UnknownSourceError` (state unchanged) when no provider serves
        ``song.source``. Provider failures end in ``PlaybackState.error`` instead of
        raising. Calls are serialized: a second ``play_song`` waits for the first.
        """

        source = self._sources.get(song.source)
        if source is None:
            log.error("Music source not found for %s (song %s)", song.source, song.id)
            raise UnknownSourceError(song.source)

        async with self._play_lock:
            previous = self._active
            self._activate(source)
            self.current_song.emit(song)
            self.progress.emit(PlaybackProgress(0.0, song.duration_seconds))
            if previous is not None and previous is not source:
                await self._silence(previous)
            log.info("Playing %s - %s from %s", song.artist, song.title, source.display_name)
            try:
                await source.prepare_playback(song)
                await source.start_playback()
            except Exception as exc:  # noqa: BLE001
                log.warning("Playback of %s failed: %s", song.id, exc)
                self.state.emit(PlaybackState.error(str(exc)))

    # Transport

    async def play(self) -> None:
        await self._forward("play", lambda source: source.start_playback())

    async def pause(self) -> None:
        await self._forward("pause", lambda source: source.pause_playback())

    async def stop(self) -> None:
        await self._forward("stop", lambda source: source.stop_playback())

    async def seek(self, time_seconds: float) -> None:
        source = self._controllable()
        if source is None:
            return
        try:
            await source.seek(time_seconds)
        except Exception as exc:  # noqa: BLE001
            log.warning("Seek to %.1f failed: %s", time_seconds, exc)

    async def seek_to_fraction(self, fraction: float) -> None:
        song = self.current_song.value
        if song is None:
            return
        await self.seek(song.duration_seconds * fraction)

    async def next(self) -> Song | None:
        return await self._navigate(PlaylistManager.next)

    async def previous(self) -> Song | None:
        return await self._navigate(PlaylistManager.previous)

    # Playlist

    async def add_to_playlist(self, song: Song) -> None:
        await self._mutate_playlist(lambda playlist: playlist.add(song))

    async def add_all_to_playlist(self, songs: Iterable[Song]) -> None:
        await self._mutate_playlist(lambda playlist: playlist.add_all(songs))

    async def remove_from_playlist(self, index: int) -> Song | None:
        return await self._mutate_playlist(lambda playlist: playlist.remove(index))

    async def move_in_playlist(self, from_index: int, to_index: int) -> None:
        await self._mutate_playlist(lambda playlist: playlist.move(from_index, to_index))

    async def clear_playlist(self) -> None:
        await self._mutate_playlist(PlaylistManager.clear)

    async def select_in_playlist(self, index: int) -> Song | None:
        return await self._mutate_playlist(lambda playlist: playlist.select_index(index))

    # Catalog

    def switch_music_source(self, kind: SourceKind) -> None:
        """Select the default source for catalog calls; playback is left untouched."""

        if kind not in self._sources:
            log.error("Cannot switch to unregistered source %s", kind)
            raise UnknownSourceError(kind)
        self.selected_source.emit(kind)

    async def search(self, query: str, *, source: SourceKind | None = None) -> list[Song]:
        return await self._route(source).search(query)

    async def fetch_details(self, song_id: str, *, source: SourceKind | None = None) -> Song:
        return await self._route(source).fetch_details(song_id)

    # Session signals

    def attach_session(self, session: SessionSignals) -> None:
        self.detach_session()
        session.connect(SessionEvent.INTERRUPTED, self._handle_interruption)
        session.connect(SessionEvent.RESUMED, self._handle_resume)
        self._session = session

    def detach_session(self) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        session.disconnect(SessionEvent.INTERRUPTED, self._handle_interruption)
        session.disconnect(SessionEvent.RESUMED, self._handle_resume)

    async def _handle_interruption(self) -> None:
        log.info("Audio session interrupted; pausing")
        await self.pause()

    async def _handle_resume(self) -> None:
        log.info("Audio session resumed; resuming playback")
        await self.play()

    # Lifecycle

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.detach_session()
        self._cursor_subscription.dispose()
        async with self._play_lock:
            self._dispose_mirrors()
            self._active = None
            for source in self._sources.values():
                await source.aclose()
        self.state.emit(PlaybackState.STOPPED)
        log.info("Playback coordinator closed")

    async def __aenter__(self) -> PlaybackCoordinator:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # Internals

    def _activate(self, source: PlaybackSource) -> None:
        if source is self._active and self._mirrors:
            return
        self._dispose_mirrors()
        self._active = source
        self.active_source.emit(source.kind)
        # Only live changes: a provider used earlier still holds its last song.
        self._mirrors = [
            source.state.subscribe(self.state.emit, replay=False),
            source.progress.subscribe(self.progress.emit, replay=False),
            source.current_song.subscribe(self.current_song.emit, replay=False),
        ]

    def _dispose_mirrors(self) -> None:
        for subscription in self._mirrors:
            subscription.dispose()
        self._mirrors = []

    async def _silence(self, source: PlaybackSource) -> None:
        if source.state.value.status in {PlaybackStatus.STOPPED, PlaybackStatus.ERROR}:
            return
        try:
            await source.stop_playback()
        except Exception as exc:  # noqa: BLE001
            log.warning("Could not stop %s: %s", source.display_name, exc)

    def _controllable(self) -> PlaybackSource | None:
        source = self._active
        if source is None or source.current_song.value is None:
            return None
        return source

    async def _forward(
        self,
        command: str,
        call: Callable[[PlaybackSource], Awaitable[None]],
    ) -> None:
        source = self._controllable()
        if source is None:
            log.debug("Ignoring %s: nothing is loaded", command)
            return
        log.info("%s on %s", command.capitalize(), source.display_name)
        try:
            await call(source)
        except Exception as exc:  # noqa: BLE001
            log.warning("%s failed: %s", command.capitalize(), exc)
            self.state.emit(PlaybackState.error(str(exc)))

    def _route(self, kind: SourceKind | None) -> PlaybackSource:
        effective = kind if kind is not None else self.selected_source.value
        source = self._sources.get(effective)
        if source is None:
            raise UnknownSourceError(effective)
        return source

    def _on_cursor_song(self, song: Song | None) -> None:
        self._cursor_moved = True
        self._cursor_song = song

    async def _mutate_playlist[R](self, mutate: Callable[[PlaylistManager], R]) -> R:
        async with self._playlist_lock:
            self._cursor_moved = False
            result = mutate(self.playlist)
            moved, song = self._cursor_moved, self._cursor_song
            self._cursor_moved = False
        if moved and song is not None:
            await self._play_quietly(song)
        return result

    async def _navigate(self, step: Callable[[PlaylistManager], Song | None]) -> Song | None:
        async with self._playlist_lock:
            song = step(self.playlist)
            self._cursor_moved = False
        if song is not None:
            await self._play_quietly(song)
        return song

    async def _play_quietly(self, song: Song) -> None:
        try:
            await self.play_song(song)
        except UnknownSourceError:
            log.warning("Skipping %s: its source is not registered", song.id)
