"""TheAudioDB catalog client."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from playhub.adapters.http_resilience import ResilientClient
from playhub.config.audiodb import get_audiodb_config
from playhub.domain.errors import DecodeError, NetworkError

from .schema import AudioDbTrack, AudioDbTracksResponse
from .translator import translate_track

if TYPE_CHECKING:
    from collections.abc import Callable

    from playhub.config.audiodb import AudioDbConfig
    from playhub.config.http_resilience import ResilienceConfig
    from playhub.domain.model import Song

log = getLogger(__name__)

SEARCH_PATH = "search.php"
TRACK_PATH = "track.php"


class AudioDbCatalog:
    """Search and track lookups against TheAudioDB JSON API.

    One client from ``client_factory`` is opened on first use and shared by every call,
    so its rate limit and response cache span the catalog's lifetime. Tests swap in a
    client backed by ``httpx.MockTransport``.
    """

    def __init__(
        self,
        *,
        config: AudioDbConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or get_audiodb_config()
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None

    async def search(self, query: str) -> list[Song]:
        response = await self._get_tracks(SEARCH_PATH, {"s": query})
        return [translate_track(track) for track in response.tracks or ()]

    async def fetch_details(self, song_id: str) -> Song:
        response = await self._get_tracks(TRACK_PATH, {"h": song_id})
        track = _first_track(response)
        if track is None:
            raise DecodeError(f"AudioDB returned no track for id {song_id!r}")
        return translate_track(track)

    async def aclose(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    def _ensure_client(self) -> ResilientClient:
        if self._client is None:
            self._client = self._client_factory(self._config.resilience)
        return self._client

    async def _get_tracks(self, path: str, params: dict[str, str]) -> AudioDbTracksResponse:
        client = self._ensure_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise NetworkError(f"AudioDB {path} answered {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"AudioDB {path} request failed: {exc}") from exc
        return decode_tracks_response(response.content)


def decode_tracks_response(content: bytes) -> AudioDbTracksResponse:
    try:
        payload = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"AudioDB response is not JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError("Unexpected AudioDB response payload")
    try:
        return AudioDbTracksResponse.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Malformed AudioDB response: {exc}") from exc


def _first_track(response: AudioDbTracksResponse) -> AudioDbTrack | None:
    if not response.tracks:
        return None
    return response.tracks[0]
