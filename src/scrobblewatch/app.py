"""Application orchestration entry points."""

from __future__ import annotations

import time
from logging import getLogger
from typing import TYPE_CHECKING

from scrobblewatch.adapters.lastfm import LastFmClient, LastFmSource
from scrobblewatch.config import get_lastfm_config

if TYPE_CHECKING:
    from collections.abc import Callable

    from scrobblewatch.config import LastFmConfig
    from scrobblewatch.domain.model import CurrentTrack
    from scrobblewatch.domain.ports import CoverDownloader, NowPlayingSource

    TrackCallback = Callable[[CurrentTrack], None]

log = getLogger(__name__)


def build_lastfm_source(
    config: LastFmConfig | None = None,
    *,
    cover_downloader: CoverDownloader | None = None,
) -> LastFmSource:
    """Create a Last.fm source with its own HTTP client."""

    effective_config = config or get_lastfm_config()
    client = LastFmClient(
        base_url=effective_config.base_url,
        timeout_seconds=effective_config.timeout_seconds,
    )
    return LastFmSource(effective_config, client, cover_downloader=cover_downloader)


def watch_now_playing(
    source: NowPlayingSource,
    *,
    interval_seconds: float = 1.0,
    iterations: int | None = None,
    on_update: TrackCallback | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Refresh ``source`` on a fixed cadence, reporting every changed snapshot.

    Returns the number of polls performed. Runs forever unless ``iterations`` is set.
    """

    log.info(
        "Watching now playing: interval=%ss, iterations=%s", interval_seconds, iterations
    )
    last_seen: CurrentTrack | None = None
    polls = 0
    while iterations is None or polls < iterations:
        if polls:
            sleep(interval_seconds)
        track = source.refresh()
        polls += 1
        if track != last_seen:
            last_seen = track.snapshot()
            if on_update is not None:
                on_update(track)
    return polls
