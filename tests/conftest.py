from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from playhub.config.playback import PlaybackSettings
from playhub.domain.model import Song, SourceKind

if TYPE_CHECKING:
    from collections.abc import Callable

# Ten ticks per 100ms keeps clock-driven tests fast and still observable.
FAST_TICK_SECONDS = 0.01


def make_song(
    song_id: str,
    *,
    title: str | None = None,
    source: SourceKind = SourceKind.LOCAL,
    duration: float = 180,
) -> Song:
    title = title or f"Song {song_id}"
    if source is SourceKind.LOCAL:
        return Song.local(
            id=song_id,
            title=title,
            artist="Test Artist",
            album="Test Album",
            duration_seconds=duration,
            local_path=f"/music/{song_id}.mp3",
        )
    return Song.streaming(
        id=song_id,
        title=title,
        artist="Test Artist",
        album="Test Album",
        duration_seconds=duration,
        source=source,
        stream_url=f"https://example.com/{song_id}.mp3",
    )


@pytest.fixture
def song_factory() -> Callable[..., Song]:
    return make_song


@pytest.fixture
def fast_settings() -> PlaybackSettings:
    return PlaybackSettings.instant(tick_seconds=FAST_TICK_SECONDS)


@pytest.fixture
def songs() -> list[Song]:
    return [make_song(song_id) for song_id in ("a", "b", "c", "d")]


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    for name in (
        "SPOTIFY_CLIENT_ID",
        "SPOTIFY_CLIENT_SECRET",
        "AUDIODB_API_KEY",
        "PLAYHUB_TICK_SECONDS",
        "PLAYHUB_BUFFERING_SCALE",
        "PLAYHUB_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PLAYHUB_DATA_DIR", str(tmp_path_factory.mktemp("playhub-data")))
