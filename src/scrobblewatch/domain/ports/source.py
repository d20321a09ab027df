"""Ports between now-playing sources and the host application."""

from __future__ import annotations

from enum import IntFlag
from logging import getLogger
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from scrobblewatch.domain.model import CurrentTrack

log = getLogger(__name__)


class Capability(IntFlag):
    """Track metadata a source can populate, advertised to the host."""

    NONE = 0
    ALBUM = 1 << 0
    COVER = 1 << 1
    TITLE = 1 << 2
    ARTIST = 1 << 3
    DURATION = 1 << 4


@runtime_checkable
class CoverDownloader(Protocol):
    """Callable port fetching the cover art referenced by a track."""

    def __call__(self, track: CurrentTrack) -> None:
        ...


class NullCoverDownloader:
    """Cover downloader used when the host does not display artwork."""

    def __call__(self, track: CurrentTrack) -> None:
        log.debug("Skipping cover download for %r", track.cover_link)


@runtime_checkable
class NowPlayingSource(Protocol):
    """Port implemented by every source that can report the current track."""

    @property
    def capabilities(self) -> Capability:
        ...

    def refresh(self) -> CurrentTrack:
        ...

    def valid_format(self, fmt: str) -> bool:
        ...


__all__ = ["Capability", "CoverDownloader", "NowPlayingSource", "NullCoverDownloader"]
