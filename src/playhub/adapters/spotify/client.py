"""Spotipy-based catalog client for the Spotify Web API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import requests
import spotipy
from pydantic import ValidationError
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from playhub.domain.errors import DecodeError, NetworkError

from .schema import SpotifySearchResponse, SpotifyTrack
from .translator import translate_track

if TYPE_CHECKING:
    from collections.abc import Callable

    from playhub.config.spotify import SpotifyConfig
    from playhub.domain.model import Song

log = getLogger(__name__)


class SpotifyCatalog:
    """Track search and lookup via spotipy.

    spotipy is blocking, so every call runs in a worker thread. Credentials use the
    client-credentials flow; no user authorisation is involved.
    """

    def __init__(self, *, config: SpotifyConfig, client: spotipy.Spotify | None = None) -> None:
        if client is None:
            auth_manager = SpotifyClientCredentials(
                client_id=config.client_id,
                client_secret=config.client_secret,
            )
            client = spotipy.Spotify(auth_manager=auth_manager)
        self._config = config
        self._client = client

    async def search(self, query: str) -> list[Song]:
        if not query.strip():
            # The Web API rejects blank queries.
            return []
        raw_payload = await self._call(
            lambda: self._client.search(  # pyright: ignore[reportUnknownMemberType]
                q=query,
                type="track",
                limit=self._config.search_limit,
                market=self._config.market,
            )
        )
        try:
            payload = SpotifySearchResponse.model_validate(raw_payload)
        except ValidationError as exc:
            raise DecodeError(f"Malformed Spotify search response: {exc}") from exc
        return [translate_track(track) for track in payload.tracks.items]

    async def fetch_details(self, song_id: str) -> Song:
        raw_payload = await self._call(
            lambda: self._client.track(song_id, market=self._config.market)  # pyright: ignore[reportUnknownMemberType]
        )
        if raw_payload is None:
            raise DecodeError(f"Spotify returned no track for id {song_id!r}")
        try:
            track = SpotifyTrack.model_validate(raw_payload)
        except ValidationError as exc:
            raise DecodeError(f"Malformed Spotify track {song_id!r}: {exc}") from exc
        return translate_track(track)

    async def aclose(self) -> None:
        return None

    async def _call(self, func: Callable[[], object]) -> object:
        try:
            return await asyncio.to_thread(func)
        except SpotifyException as exc:
            log.warning("Spotify request failed: %s", exc)
            raise NetworkError(
                f"Spotify request failed: {exc.msg}", status_code=exc.http_status
            ) from exc
        except SpotifyOauthError as exc:
            raise NetworkError(f"Spotify authentication failed: {exc}") from exc
        except requests.RequestException as exc:
            raise NetworkError(f"Spotify request failed: {exc}") from exc
