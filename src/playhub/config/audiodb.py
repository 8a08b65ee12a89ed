"""TheAudioDB configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

AUDIODB_BASE_URL_TEMPLATE = "https://www.theaudiodb.com/api/v1/json/{api_key}/"
AUDIODB_PUBLIC_API_KEY = "2"
AUDIODB_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class AudioDbConfig:
    api_key: str
    resilience: ResilienceConfig


def has_audiodb_tracks(payload: object) -> bool:
    """Return True when an AudioDB payload carries at least one track.

    AudioDB answers a miss with ``{"track": null}``; those are not worth caching
    because the catalog may learn the track later.
    """
    if not isinstance(payload, dict):
        return False
    tracks = payload.get("track") or payload.get("tracks")
    return isinstance(tracks, list) and bool(tracks)


def get_audiodb_config(*, resilience: ResilienceConfig | None = None) -> AudioDbConfig:
    api_key = optional_env_var("AUDIODB_API_KEY") or AUDIODB_PUBLIC_API_KEY
    return AudioDbConfig(
        api_key=api_key,
        resilience=resilience
        or ResilienceConfig(
            name="audiodb",
            base_url=AUDIODB_BASE_URL_TEMPLATE.format(api_key=api_key),
            timeout_seconds=AUDIODB_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            retry=RetryPolicy(total=2),
            cache=CacheConfig(should_cache=has_audiodb_tracks),
        ),
    )
