"""Source-kind to provider dispatch."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from playhub.domain.errors import UnknownSourceError
from playhub.domain.model import SourceKind

from .audiodb import AudioDbSource
from .discogs import DiscogsSource
from .local import LocalSource
from .spotify import SpotifySource

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from playhub.config.playback import PlaybackSettings

    from .base import PlaybackSource

SOURCE_TYPES: Mapping[SourceKind, type[PlaybackSource]] = MappingProxyType(
    {
        SourceKind.LOCAL: LocalSource,
        SourceKind.SPOTIFY: SpotifySource,
        SourceKind.AUDIODB: AudioDbSource,
        SourceKind.DISCOGS: DiscogsSource,
    }
)


def create_source(kind: SourceKind, *, settings: PlaybackSettings | None = None) -> PlaybackSource:
    source_type = SOURCE_TYPES.get(kind)
    if source_type is None:
        raise UnknownSourceError(kind)
    return source_type(settings=settings)


def create_sources(
    kinds: Iterable[SourceKind] = tuple(SourceKind),
    *,
    settings: PlaybackSettings | None = None,
) -> dict[SourceKind, PlaybackSource]:
    """One freshly constructed provider per kind, in ``kinds`` order."""

    return {kind: create_source(kind, settings=settings) for kind in kinds}
