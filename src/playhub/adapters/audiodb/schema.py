"""Pydantic models describing TheAudioDB track payloads."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class AudioDbBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AudioDbTrack(AudioDbBaseModel):
    """One track record; every field is optional on the wire."""

    id: str | None = Field(default=None, alias="idTrack")
    title: str | None = Field(default=None, alias="strTrack")
    artist: str | None = Field(default=None, alias="strArtist")
    album: str | None = Field(default=None, alias="strAlbum")
    duration: str | None = Field(default=None, alias="intDuration")
    video_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("strMusicVidUrl", "strMusicVid"),
    )
    thumbnail_url: str | None = Field(default=None, alias="strTrackThumb")

    @field_validator("id", "duration", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    _normalize_blanks = field_validator(
        "id", "title", "artist", "album", "duration", "video_url", "thumbnail_url", mode="before"
    )(_blank_to_none)


class AudioDbTracksResponse(AudioDbBaseModel):
    """Search and lookup responses; the API sends ``null`` when nothing matched."""

    tracks: list[AudioDbTrack] | None = Field(
        default=None,
        validation_alias=AliasChoices("track", "tracks"),
    )
