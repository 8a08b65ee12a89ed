"""TheAudioDB streaming source."""

from __future__ import annotations

from typing import ClassVar

from playhub.adapters.audiodb import AudioDbCatalog
from playhub.domain.model import SourceKind

from .base import PlaybackSource


class AudioDbSource(PlaybackSource):
    kind: ClassVar[SourceKind] = SourceKind.AUDIODB
    display_name: ClassVar[str] = "AudioDB"

    @classmethod
    def default_catalog(cls) -> AudioDbCatalog:
        return AudioDbCatalog()
