"""Pydantic models describing the Last.fm API payloads.

Last.fm omits fields freely and is not consistent about their types, so every field
here is optional. A value that fails validation falls back to the field default
instead of failing the whole document, and a non-object entry in a list field is
read as an empty object so the entries around it are kept.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)


def _objects_only(value: object) -> object:
    """Replace non-object list entries with empty objects so siblings survive."""

    if isinstance(value, list):
        return [item if isinstance(item, Mapping) else {} for item in value]
    return value


class LastFmBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_invalid(
        cls,
        value: object,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> object:
        try:
            return handler(value)
        except ValidationError:
            if info.field_name is None:
                raise
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    @classmethod
    def from_payload(cls, payload: object) -> Self:
        """Validate a decoded JSON document, treating non-objects as empty."""

        if not isinstance(payload, Mapping):
            return cls()
        return cls.model_validate(payload)


class ImagePayload(LastFmBaseModel):
    size: str = ""
    url: str = Field("", alias="#text")


class ArtistPayload(LastFmBaseModel):
    # ``extended=1`` responses carry ``name`` instead of ``#text``.
    name: str = Field("", alias="#text")
    mbid: str | None = None


class AlbumPayload(LastFmBaseModel):
    title: str = Field("", alias="#text")
    mbid: str | None = None


class TrackAttr(LastFmBaseModel):
    nowplaying: str | None = None


class TrackPayload(LastFmBaseModel):
    artist: ArtistPayload | None = None
    album: AlbumPayload | None = None
    name: str | None = None
    url: str | None = None
    image: list[ImagePayload] = Field(default_factory=list)
    attr: TrackAttr | None = Field(default=None, alias="@attr")

    _tolerate_bad_images = field_validator("image", mode="before")(_objects_only)

    @property
    def is_now_playing(self) -> bool:
        # Last.fm reports the flag as the string "true", never as a JSON boolean.
        return self.attr is not None and self.attr.nowplaying == "true"

    @property
    def largest_image_url(self) -> str | None:
        """Images are listed smallest first, so the last one is the largest."""

        if not self.image:
            return None
        return self.image[-1].url


class RecentTracks(LastFmBaseModel):
    track: list[TrackPayload] = Field(default_factory=list)

    _tolerate_bad_tracks = field_validator("track", mode="before")(_objects_only)


class RecentTracksResponse(LastFmBaseModel):
    recenttracks: RecentTracks | None = None

    @property
    def latest_track(self) -> TrackPayload | None:
        if self.recenttracks is None or not self.recenttracks.track:
            return None
        return self.recenttracks.track[0]


class TrackInfo(LastFmBaseModel):
    name: str | None = None
    duration: str | None = None


class TrackInfoResponse(LastFmBaseModel):
    track: TrackInfo | None = None


class ErrorResponse(LastFmBaseModel):
    error: int | None = None
    message: str = ""


TrackPayloadInput = TrackPayload | Mapping[str, object]
