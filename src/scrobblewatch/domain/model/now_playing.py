"""Now-playing record shared between a source and the overlay reading it."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class CurrentTrack:
    """Snapshot of the track a source last saw.

    A source owns one instance and rewrites it in place on every poll, so the record
    carries no identity between polls.
    """

    playing: bool = False
    artists: list[str] = field(default_factory=list)
    album: str = ""
    title: str = ""
    duration_seconds: int = 0
    cover_link: str = ""

    def clear(self) -> None:
        self.playing = False
        self.artists.clear()
        self.album = ""
        self.title = ""
        self.duration_seconds = 0
        self.cover_link = ""

    def append_artist(self, name: str) -> None:
        self.artists.append(name)

    @property
    def has_lookup_key(self) -> bool:
        """Whether artist and title are known well enough to look the track up."""

        return bool(self.artists and self.artists[0] and self.title)

    @property
    def is_empty(self) -> bool:
        return not (self.artists or self.album or self.title)

    def snapshot(self) -> CurrentTrack:
        return CurrentTrack(
            playing=self.playing,
            artists=list(self.artists),
            album=self.album,
            title=self.title,
            duration_seconds=self.duration_seconds,
            cover_link=self.cover_link,
        )

    def describe(self) -> str:
        artist = ", ".join(name for name in self.artists if name) or "Unknown artist"
        text = f"{artist} - {self.title or 'Unknown title'}"
        if self.album:
            text += f" [{self.album}]"
        if self.duration_seconds > 0:
            minutes, seconds = divmod(self.duration_seconds, 60)
            text += f" ({minutes}:{seconds:02d})"
        return text
