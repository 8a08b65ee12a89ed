from __future__ import annotations

import logging
from pathlib import Path

import pytest

from playhub.config import (
    ConfigurationError,
    MissingConfigurationError,
    PlaybackSettings,
    find_spotify_config,
    get_audiodb_config,
    get_playback_settings,
    get_spotify_config,
    get_storage_config,
    require_env_vars,
)
from playhub.config.logging import log_level_from_environment
from playhub.domain.model import SourceKind


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_reports_blank_and_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLANK_VAR", "   ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert "BLANK_VAR, MISSING_VAR" in str(exc.value)


def test_playback_settings_defaults() -> None:
    settings = get_playback_settings()

    assert settings.tick_seconds == 1.0
    assert settings.buffering_delay(SourceKind.LOCAL) == 0.5
    assert settings.buffering_delay(SourceKind.SPOTIFY) == 1.0
    assert settings.buffering_delay(SourceKind.DISCOGS) == 0.0


def test_playback_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLAYHUB_TICK_SECONDS", "0.25")
    monkeypatch.setenv("PLAYHUB_BUFFERING_SCALE", "0")

    settings = get_playback_settings()

    assert settings.tick_seconds == 0.25
    assert all(settings.buffering_delay(kind) == 0 for kind in SourceKind)


def test_invalid_playback_settings_raise(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLAYHUB_TICK_SECONDS", "fast")

    with pytest.raises(ConfigurationError, match="PLAYHUB_TICK_SECONDS"):
        get_playback_settings()
    with pytest.raises(ConfigurationError):
        PlaybackSettings(tick_seconds=0)
    with pytest.raises(ConfigurationError, match="local"):
        PlaybackSettings(buffering_delays={SourceKind.LOCAL: -1})


def test_spotify_config_requires_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    assert find_spotify_config() is None
    with pytest.raises(MissingConfigurationError):
        get_spotify_config()

    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "client")
    monkeypatch.setenv("SPOTIFY_CLIENT_SECRET", "secret")
    config = find_spotify_config()

    assert config is not None
    assert config.client_id == "client"
    assert config.market == "US"


def test_audiodb_config_defaults_to_public_key(monkeypatch: pytest.MonkeyPatch) -> None:
    config = get_audiodb_config()
    assert config.api_key == "2"
    assert config.resilience.base_url == "https://www.theaudiodb.com/api/v1/json/2/"
    assert config.resilience.ratelimit is not None

    monkeypatch.setenv("AUDIODB_API_KEY", "523532")
    assert get_audiodb_config().resilience.base_url == (
        "https://www.theaudiodb.com/api/v1/json/523532/"
    )


def test_storage_config_uses_data_dir_override(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("PLAYHUB_DATA_DIR", str(tmp_path / "data"))

    config = get_storage_config()

    assert config.playlist_path() == (tmp_path / "data" / "playlist.json").resolve()
    assert (tmp_path / "data").is_dir()


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    assert log_level_from_environment() == logging.INFO

    monkeypatch.setenv("PLAYHUB_LOG_LEVEL", "debug")
    assert log_level_from_environment() == logging.DEBUG

    monkeypatch.setenv("PLAYHUB_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        log_level_from_environment()
