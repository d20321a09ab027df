"""Domain port definitions for adapters."""

from __future__ import annotations

from .source import Capability, CoverDownloader, NowPlayingSource, NullCoverDownloader

__all__ = ["Capability", "CoverDownloader", "NowPlayingSource", "NullCoverDownloader"]
