"""Minimal Pydantic models for the Spotify Web API catalog endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyArtist(SpotifyBaseModel):
    id: str
    name: str


class SpotifyImage(SpotifyBaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class SpotifyAlbum(SpotifyBaseModel):
    id: str
    name: str
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])


class SpotifyTrack(SpotifyBaseModel):
    id: str
    name: str
    duration_ms: int | None = None
    album: SpotifyAlbum
    artists: list[SpotifyArtist] = Field(default_factory=list["SpotifyArtist"])
    external_urls: dict[str, str] = Field(default_factory=dict)
    preview_url: str | None = None


class SpotifyPage(SpotifyBaseModel):
    href: str | None = None
    limit: int | None = None
    next: str | None = None
    offset: int | None = None
    previous: str | None = None
    total: int | None = None


class SpotifyTracksPage(SpotifyPage):
    items: list[SpotifyTrack] = Field(default_factory=list["SpotifyTrack"])


class SpotifySearchResponse(SpotifyBaseModel):
    tracks: SpotifyTracksPage = Field(default_factory=SpotifyTracksPage)
