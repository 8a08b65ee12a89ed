"""Coordinator routing, transport forwarding and playlist autoplay."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from playhub.adapters.session import SessionSignalBridge
from playhub.domain.coordinator import PlaybackCoordinator
from playhub.domain.errors import UnknownSourceError
from playhub.domain.model import PlaybackState, PlaybackStatus, SourceKind
from playhub.domain.playlist import PlaylistManager
from playhub.sources import create_source, create_sources

if TYPE_CHECKING:
    from collections.abc import Callable

    from playhub.config.playback import PlaybackSettings
    from playhub.domain.model import Song


def _coordinator(
    settings: PlaybackSettings,
    kinds: tuple[SourceKind, ...] = (SourceKind.LOCAL, SourceKind.SPOTIFY),
    playlist: PlaylistManager | None = None,
) -> PlaybackCoordinator:
    return PlaybackCoordinator(create_sources(kinds, settings=settings), playlist=playlist)


def test_unknown_source_leaves_state_unchanged(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings, kinds=(SourceKind.LOCAL,)) as coordinator:
            with pytest.raises(UnknownSourceError) as excinfo:
                await coordinator.play_song(song_factory("x", source=SourceKind.DISCOGS))

            assert excinfo.value.source is SourceKind.DISCOGS
            assert coordinator.state.value == PlaybackState.STOPPED
            assert coordinator.current_song.value is None
            assert coordinator.active_source.value is None

    asyncio.run(scenario())


def test_play_song_activates_provider_and_mirrors_it(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            states: list[PlaybackStatus] = []
            coordinator.state.subscribe(lambda state: states.append(state.status))
            song = song_factory("l1", duration=1000)

            await coordinator.play_song(song)
            await asyncio.sleep(0.05)

            assert coordinator.active_source.value is SourceKind.LOCAL
            assert coordinator.current_song.value == song
            assert coordinator.state.value == PlaybackState.PLAYING
            assert coordinator.progress.value.current_time_seconds > 0
            assert PlaybackStatus.LOADING in states
            assert states[-1] is PlaybackStatus.PLAYING

    asyncio.run(scenario())


def test_switching_provider_stops_the_previous_one(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            local = coordinator.get_source(SourceKind.LOCAL)
            assert local is not None

            await coordinator.play_song(song_factory("l1", duration=1000))
            await coordinator.play_song(
                song_factory("s1", source=SourceKind.SPOTIFY, duration=1000)
            )

            assert local.state.value == PlaybackState.STOPPED
            assert coordinator.active_source.value is SourceKind.SPOTIFY
            assert coordinator.state.value == PlaybackState.PLAYING
            current = coordinator.current_song.value
            assert current is not None
            assert current.id == "s1"

    asyncio.run(scenario())


def test_returning_to_a_provider_does_not_republish_its_old_song(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            songs: list[str | None] = []
            coordinator.current_song.subscribe(
                lambda song: songs.append(song.id if song else None), replay=False
            )
            x = song_factory("x", duration=1000)
            y = song_factory("y", source=SourceKind.SPOTIFY, duration=2000)
            z = song_factory("z", duration=3000)

            await coordinator.play_song(x)
            await coordinator.play_song(y)

            states: list[PlaybackStatus] = []
            durations: list[float] = []
            coordinator.state.subscribe(lambda state: states.append(state.status), replay=False)
            coordinator.progress.subscribe(
                lambda progress: durations.append(progress.duration_seconds), replay=False
            )
            await coordinator.play_song(z)
            await asyncio.sleep(0.05)

            assert songs == ["x", "x", "y", "y", "z", "z"]
            assert states == [PlaybackStatus.LOADING, PlaybackStatus.PLAYING]
            assert durations
            assert set(durations) == {3000}

    asyncio.run(scenario())


def test_concurrent_play_song_calls_are_serialized(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            first = song_factory("l1", duration=1000)
            second = song_factory("s1", source=SourceKind.SPOTIFY, duration=1000)

            await asyncio.gather(coordinator.play_song(first), coordinator.play_song(second))

            assert coordinator.current_song.value == second
            assert coordinator.active_source.value is SourceKind.SPOTIFY
            playing = [
                source.kind
                for source in coordinator.sources.values()
                if source.state.value == PlaybackState.PLAYING
            ]
            assert playing == [SourceKind.SPOTIFY]

    asyncio.run(scenario())


def test_provider_failure_becomes_error_state(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        source = create_source(SourceKind.LOCAL, settings=fast_settings)
        await source.aclose()
        async with PlaybackCoordinator({SourceKind.LOCAL: source}) as coordinator:
            await coordinator.play_song(song_factory("l1"))

            state = coordinator.state.value
            assert state.is_error
            assert state.message == "Local Files has been closed"

    asyncio.run(scenario())


def test_transport_without_active_provider_is_a_no_op(fast_settings: PlaybackSettings) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            await coordinator.play()
            await coordinator.pause()
            await coordinator.seek(10)
            await coordinator.stop()

            assert coordinator.state.value == PlaybackState.STOPPED
            assert coordinator.active is None

    asyncio.run(scenario())


def test_seek_is_clamped_to_the_song(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            await coordinator.play_song(song_factory("l1", duration=100))
            await coordinator.pause()

            await coordinator.seek(500)
            assert coordinator.progress.value.current_time_seconds == 100
            await coordinator.seek(-3)
            assert coordinator.progress.value.current_time_seconds == 0
            await coordinator.seek_to_fraction(0.5)
            assert coordinator.progress.value.current_time_seconds == 50
            assert coordinator.state.value == PlaybackState.PAUSED

    asyncio.run(scenario())


def test_interruption_round_trip(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        bridge = SessionSignalBridge()
        async with _coordinator(fast_settings) as coordinator:
            coordinator.attach_session(bridge)
            await coordinator.play_song(song_factory("l1", duration=1000))
            await asyncio.sleep(0.05)

            bridge.interrupted()
            await bridge.drain()
            assert coordinator.state.value == PlaybackState.PAUSED
            paused_at = coordinator.progress.value.current_time_seconds
            await asyncio.sleep(0.05)
            assert coordinator.progress.value.current_time_seconds == paused_at

            bridge.resumed()
            await bridge.drain()
            await asyncio.sleep(0.05)
            assert coordinator.state.value == PlaybackState.PLAYING
            assert coordinator.progress.value.current_time_seconds > paused_at

    asyncio.run(scenario())


def test_detached_session_no_longer_pauses(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        bridge = SessionSignalBridge()
        async with _coordinator(fast_settings) as coordinator:
            coordinator.attach_session(bridge)
            await coordinator.play_song(song_factory("l1", duration=1000))
            coordinator.detach_session()

            bridge.interrupted()
            await bridge.drain()

            assert coordinator.state.value == PlaybackState.PLAYING

    asyncio.run(scenario())


def test_adding_to_an_empty_playlist_starts_playback(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            first = song_factory("l1", duration=1000)

            await coordinator.add_to_playlist(first)
            assert coordinator.current_song.value == first
            assert coordinator.state.value == PlaybackState.PLAYING

            await coordinator.add_to_playlist(song_factory("l2", duration=1000))
            assert coordinator.current_song.value == first
            assert coordinator.playlist.song_count == 2

    asyncio.run(scenario())


def test_next_and_previous_play_the_new_current_song(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        songs = [
            song_factory("l1", duration=1000),
            song_factory("s1", source=SourceKind.SPOTIFY, duration=1000),
            song_factory("l2", duration=1000),
        ]
        async with _coordinator(fast_settings, playlist=PlaylistManager(songs)) as coordinator:
            assert coordinator.state.value == PlaybackState.STOPPED

            played = await coordinator.next()
            assert played == songs[1]
            assert coordinator.active_source.value is SourceKind.SPOTIFY

            played = await coordinator.previous()
            assert played == songs[0]
            assert coordinator.active_source.value is SourceKind.LOCAL
            assert coordinator.current_song.value == songs[0]
            assert coordinator.state.value == PlaybackState.PLAYING

    asyncio.run(scenario())


def test_removing_the_current_song_plays_its_successor(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        songs = [song_factory("l1", duration=1000), song_factory("l2", duration=1000)]
        async with _coordinator(fast_settings, playlist=PlaylistManager(songs)) as coordinator:
            removed = await coordinator.remove_from_playlist(0)

            assert removed == songs[0]
            assert coordinator.current_song.value == songs[1]
            assert coordinator.state.value == PlaybackState.PLAYING

    asyncio.run(scenario())


def test_playlist_song_with_unregistered_source_is_skipped(
    fast_settings: PlaybackSettings, song_factory: Callable[..., Song]
) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings, kinds=(SourceKind.LOCAL,)) as coordinator:
            await coordinator.add_to_playlist(song_factory("d1", source=SourceKind.DISCOGS))

            assert coordinator.playlist.song_count == 1
            assert coordinator.state.value == PlaybackState.STOPPED

    asyncio.run(scenario())


def test_switch_music_source_routes_catalog_calls(fast_settings: PlaybackSettings) -> None:
    async def scenario() -> None:
        async with _coordinator(fast_settings) as coordinator:
            local_hits = await coordinator.search("song 2")
            coordinator.switch_music_source(SourceKind.SPOTIFY)
            spotify_hits = await coordinator.search("popular")
            detail = await coordinator.fetch_details("local-1", source=SourceKind.LOCAL)

            assert [song.id for song in local_hits] == ["local-2"]
            assert [song.id for song in spotify_hits] == ["spotify-3"]
            assert detail.title == "Local Song 1"
            assert coordinator.selected_source.value is SourceKind.SPOTIFY
            assert coordinator.state.value == PlaybackState.STOPPED

            with pytest.raises(UnknownSourceError):
                coordinator.switch_music_source(SourceKind.DISCOGS)

    asyncio.run(scenario())


def test_aclose_closes_every_provider(fast_settings: PlaybackSettings) -> None:
    async def scenario() -> None:
        coordinator = _coordinator(fast_settings)
        await coordinator.aclose()
        await coordinator.aclose()

        assert all(source.closed for source in coordinator.sources.values())

    asyncio.run(scenario())
