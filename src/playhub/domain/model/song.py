"""Song value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import SourceKind


@dataclass(frozen=True, slots=True)
class Song:
    """An immutable track reference, equal to any other song with the same ``id``.

    ``local_path`` is expected exactly for local songs and ``stream_url`` for every other
    source. The shape does not enforce this; use :meth:`local` and :meth:`streaming`,
    which do.
    """

    id: str
    title: str = field(compare=False)
    artist: str = field(compare=False)
    album: str = field(compare=False)
    duration_seconds: float = field(compare=False)
    source: SourceKind = field(compare=False)
    artwork_url: str | None = field(default=None, compare=False)
    stream_url: str | None = field(default=None, compare=False)
    local_path: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.duration_seconds < 0:
            raise ValueError(f"Song {self.id!r} has a negative duration: {self.duration_seconds}")

    @classmethod
    def local(
        cls,
        *,
        id: str,  # noqa: A002
        title: str,
        artist: str,
        album: str,
        duration_seconds: float,
        local_path: str,
        artwork_url: str | None = None,
    ) -> Song:
        return cls(
            id=id,
            title=title,
            artist=artist,
            album=album,
            duration_seconds=duration_seconds,
            source=SourceKind.LOCAL,
            artwork_url=artwork_url,
            local_path=local_path,
        )

    @classmethod
    def streaming(
        cls,
        *,
        id: str,  # noqa: A002
        title: str,
        artist: str,
        album: str,
        duration_seconds: float,
        source: SourceKind,
        stream_url: str | None,
        artwork_url: str | None = None,
    ) -> Song:
        if source is SourceKind.LOCAL:
            raise ValueError("Streaming songs cannot use the local source; use Song.local")
        return cls(
            id=id,
            title=title,
            artist=artist,
            album=album,
            duration_seconds=duration_seconds,
            source=source,
            artwork_url=artwork_url,
            stream_url=stream_url,
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against title, artist and album."""

        needle = query.casefold()
        return any(needle in value.casefold() for value in (self.title, self.artist, self.album))
