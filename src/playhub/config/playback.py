"""Simulated playback timing values."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from playhub.domain.model.enums import SourceKind

from .env import optional_float_env_var
from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TICK_SECONDS = 1.0

# Artificial "buffering" before a source reports ``loading``.
DEFAULT_BUFFERING_DELAYS: Mapping[SourceKind, float] = MappingProxyType(
    {
        SourceKind.LOCAL: 0.5,
        SourceKind.SPOTIFY: 1.0,
        SourceKind.AUDIODB: 0.0,
        SourceKind.DISCOGS: 0.0,
    }
)


@dataclass(frozen=True, slots=True)
class PlaybackSettings:
    tick_seconds: float = DEFAULT_TICK_SECONDS
    buffering_delays: Mapping[SourceKind, float] = field(
        default_factory=lambda: DEFAULT_BUFFERING_DELAYS
    )

    def __post_init__(self) -> None:
        if self.tick_seconds <= 0:
            raise ConfigurationError(f"tick_seconds must be positive, got {self.tick_seconds}")
        negative = sorted(kind for kind, delay in self.buffering_delays.items() if delay < 0)
        if negative:
            raise ConfigurationError(f"Negative buffering delay for: {', '.join(negative)}")

    def buffering_delay(self, kind: SourceKind) -> float:
        return self.buffering_delays.get(kind, 0.0)

    @classmethod
    def instant(cls, *, tick_seconds: float = DEFAULT_TICK_SECONDS) -> PlaybackSettings:
        """Settings without buffering delays, handy for tests and scripted drivers."""

        return cls(
            tick_seconds=tick_seconds,
            buffering_delays=MappingProxyType(dict.fromkeys(SourceKind, 0.0)),
        )


def get_playback_settings() -> PlaybackSettings:
    tick_seconds = optional_float_env_var("PLAYHUB_TICK_SECONDS")
    scale = optional_float_env_var("PLAYHUB_BUFFERING_SCALE")
    delays = DEFAULT_BUFFERING_DELAYS
    if scale is not None:
        delays = MappingProxyType({kind: delay * scale for kind, delay in delays.items()})
    return PlaybackSettings(
        tick_seconds=tick_seconds if tick_seconds is not None else DEFAULT_TICK_SECONDS,
        buffering_delays=delays,
    )
