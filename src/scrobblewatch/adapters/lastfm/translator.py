"""Translate Last.fm payloads into the now-playing record."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .schema import TrackInfoResponse, TrackPayload, TrackPayloadInput

if TYPE_CHECKING:
    from scrobblewatch.domain.model import CurrentTrack

log = getLogger(__name__)


def _ensure_track_payload(payload: TrackPayloadInput) -> TrackPayload:
    if isinstance(payload, TrackPayload):
        return payload
    return TrackPayload.from_payload(payload)


def apply_recent_track(current: CurrentTrack, payload: TrackPayloadInput) -> TrackPayload:
    """Copy the fields present in a recent-tracks entry onto ``current``.

    Every field is independent: an absent one leaves the record at its cleared value.
    Returns the validated payload so callers can inspect what was present.
    """

    track = _ensure_track_payload(payload)

    if track.attr is not None:
        current.playing = track.is_now_playing
        if current.playing:
            cover = track.largest_image_url
            if cover is not None:
                current.cover_link = cover

    if track.artist is not None:
        current.append_artist(track.artist.name)

    if track.album is not None:
        current.album = track.album.title

    if track.name is not None:
        current.title = track.name

    return track


def parse_duration(payload: object) -> int | None:
    """Return the track length in seconds from a ``track.getInfo`` document."""

    response = TrackInfoResponse.from_payload(payload)
    if response.track is None or response.track.duration is None:
        return None
    try:
        return int(response.track.duration)
    except ValueError:
        log.debug("Ignoring non-numeric track duration %r", response.track.duration)
        return None
