"""Poll Last.fm for the track a user is currently playing."""

from __future__ import annotations

import re
import time
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from scrobblewatch.domain.model import CurrentTrack
from scrobblewatch.domain.ports.source import Capability, NullCoverDownloader

from .schema import ErrorResponse, RecentTracksResponse
from .translator import apply_recent_track, parse_duration

if TYPE_CHECKING:
    from collections.abc import Callable

    from scrobblewatch.config.lastfm import LastFmConfig
    from scrobblewatch.domain.ports.source import CoverDownloader

    from .client import LastFmClient, LastFmResponse
    from .schema import TrackPayload

log = getLogger(__name__)

# Last.fm reports no playback position, so with the shared key we simply poll slowly.
REFRESH_INTERVAL_NS = 5_000_000_000
ERROR_REFRESH_INTERVAL_NS = 1_500_000_000

LASTFM_CAPABILITIES = (
    Capability.ALBUM | Capability.COVER | Capability.TITLE | Capability.ARTIST | Capability.DURATION
)

# Placeholders for data Last.fm cannot provide (progress, release year, ...).
_UNSUPPORTED_FORMAT_TOKENS = re.compile(r"%[prbydn]", re.IGNORECASE)


class LastFmSource:
    """Now-playing source backed by ``user.getrecenttracks`` and ``track.getInfo``.

    The source owns its ``current`` record and rewrites it on every poll. Callers are
    expected to invoke :meth:`refresh` from a single thread and to read ``current``
    between polls.
    """

    def __init__(
        self,
        config: LastFmConfig,
        client: LastFmClient,
        *,
        cover_downloader: CoverDownloader | None = None,
        clock: Callable[[], int] = time.monotonic_ns,
        current: CurrentTrack | None = None,
    ) -> None:
        self.config = config
        self.client = client
        self.cover_downloader = cover_downloader or NullCoverDownloader()
        self.clock = clock
        self.current = current if current is not None else CurrentTrack()
        self.next_refresh_ns = 0

    @property
    def capabilities(self) -> Capability:
        return LASTFM_CAPABILITIES

    def valid_format(self, fmt: str) -> bool:
        """Reject display templates referencing fields this source never fills."""

        return _UNSUPPORTED_FORMAT_TOKENS.search(fmt) is None

    def refresh(self) -> CurrentTrack:
        if not self.config.api_key:
            log.error("No Last.fm API key configured")
            return self.current

        if not self.config.user_name:
            return self.current

        if not self.config.custom_api_key and self.clock() < self.next_refresh_ns:
            return self.current

        self.current.clear()
        response = self.client.request(
            httpx.QueryParams(
                {
                    "method": "user.getrecenttracks",
                    "user": self.config.user_name,
                    "api_key": self.config.api_key,
                    "limit": 1,
                    "format": "json",
                }
            )
        )

        if response.ok:
            track = RecentTracksResponse.from_payload(response.payload).latest_track
            if track is not None:
                self._extract(track)
            else:
                self._log_api_error(response)
            self.next_refresh_ns = self.clock() + REFRESH_INTERVAL_NS
        else:
            log.error("Received error code from Last.fm request: %s", response.status_code)
            self._log_api_error(response)
            self.next_refresh_ns = self.clock() + ERROR_REFRESH_INTERVAL_NS

        return self.current

    def _extract(self, track: TrackPayload) -> None:
        apply_recent_track(self.current, track)
        if track.attr is not None:
            self.cover_downloader(self.current)

        if self.current.has_lookup_key:
            duration = self._lookup_duration(self.current.artists[0], self.current.title)
            if duration is not None:
                self.current.duration_seconds = duration

    def _lookup_duration(self, artist: str, title: str) -> int | None:
        response = self.client.request(
            httpx.QueryParams(
                {
                    "method": "track.getInfo",
                    "api_key": self.config.api_key,
                    "artist": artist,
                    "track": title,
                    "format": "json",
                }
            )
        )
        if not response.ok:
            log.debug(
                "Track info lookup for %s - %s returned %s", artist, title, response.status_code
            )
            return None
        return parse_duration(response.payload)

    @staticmethod
    def _log_api_error(response: LastFmResponse) -> None:
        error = ErrorResponse.from_payload(response.payload)
        if error.error is not None:
            log.warning(f"Last.fm API error {error.error}: {error.message}")

