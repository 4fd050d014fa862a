"""Data structures representing albums and their tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True, frozen=True, eq=False)
class Track:
    """A playable track and the audio file backing it.

    Tracks compare by identity so duplicate catalog entries stay distinct.
    """

    title: str
    location: Path


@dataclass(slots=True, frozen=True)
class Artwork:
    """Cover image reference and the size it is drawn at."""

    path: Path
    width: int
    height: int


@dataclass(slots=True, frozen=True)
class Album:
    """An album with its artwork and tracks in catalog order."""

    title: str
    artist: str
    artwork: Artwork
    tracks: tuple[Track, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return f"{self.title} by {self.artist}"

    def index_of(self, track: Track | None) -> int | None:
        """Return the position of ``track`` in this album, or None if absent."""
        if track is None:
            return None
        for index, candidate in enumerate(self.tracks):
            if candidate is track:
                return index
        return None
