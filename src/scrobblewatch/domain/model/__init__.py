"""Domain model for now-playing data."""

from __future__ import annotations

from .now_playing import CurrentTrack

__all__ = ["CurrentTrack"]
