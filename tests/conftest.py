from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from scrobblewatch.adapters.lastfm import LastFmClient, LastFmSource
from scrobblewatch.config import LastFmConfig
from tests.support.lastfm import FakeClock, Handler, RecordingDownloader, SourceHarness


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def shared_key_config() -> LastFmConfig:
    return LastFmConfig(api_key="shared", user_name="demo-user", custom_api_key=False)


@pytest.fixture
def make_source(
    clock: FakeClock,
    shared_key_config: LastFmConfig,
) -> Callable[..., SourceHarness]:
    def factory(handler: Handler, *, config: LastFmConfig | None = None) -> SourceHarness:
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        downloader = RecordingDownloader()
        client = LastFmClient(transport=httpx.MockTransport(recording_handler))
        source = LastFmSource(
            config or shared_key_config,
            client,
            cover_downloader=downloader,
            clock=clock,
        )
        return SourceHarness(source=source, requests=requests, downloader=downloader)

    return factory


@pytest.fixture
def now_playing_payload() -> dict[str, object]:
    return {
        "artist": {"mbid": "", "#text": "A"},
        "streamable": "0",
        "image": [{"size": "small", "#text": "http://x/y.jpg"}],
        "mbid": "",
        "album": {"mbid": "", "#text": "Album"},
        "name": "T",
        "url": "https://www.last.fm/music/A/_/T",
        "@attr": {"nowplaying": "true"},
    }


@pytest.fixture
def recent_tracks(now_playing_payload: dict[str, object]) -> dict[str, object]:
    return {
        "recenttracks": {
            "track": [now_playing_payload],
            "@attr": {
                "user": "demo-user",
                "page": "1",
                "perPage": "1",
                "total": "1",
                "totalPages": "1",
            },
        }
    }
