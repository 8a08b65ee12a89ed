"""Playback error taxonomy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import SourceKind


class PlayhubError(RuntimeError):
    """Base class for playback and catalog failures."""


class UnknownSourceError(PlayhubError):
    """Raised when no provider is registered for a source kind."""

    def __init__(self, source: SourceKind | str) -> None:
        super().__init__(f"No music source registered for {source!s}")
        self.source = source


class NetworkError(PlayhubError):
    """Raised when a catalog endpoint cannot be reached or answers with an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(PlayhubError):
    """Raised when a catalog payload cannot be decoded into songs."""


class DisposedError(PlayhubError):
    """Raised when an operation reaches a provider that has already been closed."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} has been closed")
        self.name = name
