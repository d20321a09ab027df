"""Public interface for the Last.fm adapter."""

from __future__ import annotations

from .client import INVALID_STATUS_CODE, LastFmClient, LastFmResponse
from .schema import RecentTracksResponse, TrackInfoResponse, TrackPayload, TrackPayloadInput
from .source import (
    ERROR_REFRESH_INTERVAL_NS,
    LASTFM_CAPABILITIES,
    REFRESH_INTERVAL_NS,
    LastFmSource,
)
from .translator import apply_recent_track, parse_duration

__all__ = [
    "ERROR_REFRESH_INTERVAL_NS",
    "INVALID_STATUS_CODE",
    "LASTFM_CAPABILITIES",
    "REFRESH_INTERVAL_NS",
    "LastFmClient",
    "LastFmResponse",
    "LastFmSource",
    "RecentTracksResponse",
    "TrackInfoResponse",
    "TrackPayload",
    "TrackPayloadInput",
    "apply_recent_track",
    "parse_duration",
]
