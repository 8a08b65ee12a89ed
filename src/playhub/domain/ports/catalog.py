"""Ports for catalog lookups backing a playback source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from playhub.domain.model import Song


@runtime_checkable
class SongCatalog(Protocol):
    """Search and detail lookups; implementations raise ``NetworkError``/``DecodeError``."""

    async def search(self, query: str) -> list[Song]: ...

    async def fetch_details(self, song_id: str) -> Song: ...

    async def aclose(self) -> None: ...


__all__ = ["SongCatalog"]
