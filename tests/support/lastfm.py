"""Test doubles for exercising the Last.fm source over a mocked transport."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from scrobblewatch.adapters.lastfm import LastFmSource
    from scrobblewatch.domain.model import CurrentTrack

Handler = Callable[[httpx.Request], httpx.Response]


class FakeClock:
    def __init__(self, now: int = 1_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, nanoseconds: int) -> None:
        self.now += nanoseconds


@dataclass
class RecordingDownloader:
    covers: list[str] = field(default_factory=list)

    def __call__(self, track: CurrentTrack) -> None:
        self.covers.append(track.cover_link)


@dataclass
class SourceHarness:
    source: LastFmSource
    requests: list[httpx.Request]
    downloader: RecordingDownloader

    def methods(self) -> list[str]:
        return [request.url.params["method"] for request in self.requests]


def lastfm_router(
    recent: httpx.Response | dict[str, object],
    info: httpx.Response | dict[str, object] | None = None,
) -> Handler:
    """Serve canned responses keyed on the Last.fm ``method`` parameter."""

    def as_response(value: httpx.Response | dict[str, object]) -> httpx.Response:
        if isinstance(value, httpx.Response):
            return value
        return httpx.Response(status_code=200, json=value)

    def handler(request: httpx.Request) -> httpx.Response:
        method = request.url.params["method"]
        if method == "user.getrecenttracks":
            return as_response(recent)
        if method == "track.getInfo" and info is not None:
            return as_response(info)
        return httpx.Response(status_code=404, json={"error": 6, "message": "Track not found"})

    return handler
