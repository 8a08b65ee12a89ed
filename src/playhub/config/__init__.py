"""Application configuration helpers."""

from __future__ import annotations

from .audiodb import AudioDbConfig, get_audiodb_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .playback import PlaybackSettings, get_playback_settings
from .spotify import SpotifyConfig, find_spotify_config, get_spotify_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "AudioDbConfig",
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "PlaybackSettings",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SpotifyConfig",
    "StorageConfig",
    "configure_logging",
    "find_spotify_config",
    "get_audiodb_config",
    "get_playback_settings",
    "get_spotify_config",
    "get_storage_config",
    "optional_env_var",
    "require_env_vars",
]
