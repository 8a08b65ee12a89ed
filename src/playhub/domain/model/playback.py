"""Playback state and progress value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .enums import PlaybackStatus


@dataclass(frozen=True, slots=True)
class PlaybackState:
    """Tagged playback state; ``message`` is only set for :attr:`PlaybackStatus.ERROR`."""

    status: PlaybackStatus
    message: str | None = None

    STOPPED: ClassVar[PlaybackState]
    PLAYING: ClassVar[PlaybackState]
    PAUSED: ClassVar[PlaybackState]
    LOADING: ClassVar[PlaybackState]

    def __post_init__(self) -> None:
        if (self.status is PlaybackStatus.ERROR) != (self.message is not None):
            raise ValueError("Only the error state carries a message")

    @classmethod
    def error(cls, message: str) -> PlaybackState:
        return cls(PlaybackStatus.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.status is PlaybackStatus.ERROR

    def __str__(self) -> str:
        if self.message is not None:
            return f"{self.status}({self.message})"
        return str(self.status)


PlaybackState.STOPPED = PlaybackState(PlaybackStatus.STOPPED)
PlaybackState.PLAYING = PlaybackState(PlaybackStatus.PLAYING)
PlaybackState.PAUSED = PlaybackState(PlaybackStatus.PAUSED)
PlaybackState.LOADING = PlaybackState(PlaybackStatus.LOADING)


@dataclass(frozen=True, slots=True)
class PlaybackProgress:
    current_time_seconds: float = 0.0
    duration_seconds: float = 0.0

    @property
    def fraction(self) -> float:
        """Elapsed share of the track. Not clamped, so it can briefly exceed 1.0."""

        if self.duration_seconds > 0:
            return self.current_time_seconds / self.duration_seconds
        return 0.0
