"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from albumplayer.errors import ResourceError
from albumplayer.library import load_catalog
from albumplayer.models import Album
from albumplayer.playback import PlaybackController

CATALOG_TEXT = """2
Blue Train
John Coltrane
blue_train.png
3
Blue Train
blue_train.mp3
Moment's Notice
moments_notice.mp3
Locomotion
locomotion.mp3
Kind of Blue
Miles Davis
kind_of_blue.png
2
So What
so_what.mp3
Freddie Freeloader
freddie.mp3
"""


class FakeSong:
    def __init__(self, location: Path) -> None:
        self.location = location
        self.calls: list[str] = []
        self.playing = False
        self.stopped = False

    def play(self, looping: bool = False) -> None:
        self.calls.append(f"play:{looping}")
        self.playing = True

    def pause(self) -> None:
        self.calls.append("pause")
        self.playing = False

    def stop(self) -> None:
        self.calls.append("stop")
        self.playing = False
        self.stopped = True


class FakeSongFactory:
    def __init__(self) -> None:
        self.songs: list[FakeSong] = []
        self.missing: set[Path] = set()

    def __call__(self, location: Path) -> FakeSong:
        if location in self.missing:
            raise ResourceError(location, "No such file")
        song = FakeSong(location)
        self.songs.append(song)
        return song

    @property
    def live(self) -> list[FakeSong]:
        """Handles that were opened and never stopped."""
        return [song for song in self.songs if not song.stopped]


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "albums.txt"
    path.write_text(CATALOG_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def albums(catalog_file: Path) -> tuple[Album, ...]:
    return load_catalog(catalog_file)


@pytest.fixture
def songs() -> FakeSongFactory:
    return FakeSongFactory()


@pytest.fixture
def controller(albums, songs) -> PlaybackController:
    return PlaybackController(albums, songs)
