"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .errors import MissingConfigurationError

DEFAULT_SPOTIFY_MARKET = "US"
DEFAULT_SPOTIFY_SEARCH_LIMIT = 20


@dataclass(frozen=True)
class SpotifyConfig:
    """Client-credentials settings; catalog search needs no user scopes."""

    client_id: str
    client_secret: str
    market: str = DEFAULT_SPOTIFY_MARKET
    search_limit: int = DEFAULT_SPOTIFY_SEARCH_LIMIT


def get_spotify_config() -> SpotifyConfig:
    values = require_env_vars(("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"))
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        market=optional_env_var("SPOTIFY_MARKET") or DEFAULT_SPOTIFY_MARKET,
    )


def find_spotify_config() -> SpotifyConfig | None:
    """Return the Spotify config when credentials are present, else ``None``."""

    try:
        return get_spotify_config()
    except MissingConfigurationError:
        return None
