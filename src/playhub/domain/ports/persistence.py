"""Ports for playlist persistence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from playhub.domain.model import Song


@runtime_checkable
class PlaylistStore(Protocol):
    def load_playlist(self) -> list[Song]: ...

    def save_playlist(self, songs: Sequence[Song]) -> None: ...


__all__ = ["PlaylistStore"]
