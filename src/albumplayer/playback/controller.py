"""Album and track selection plus play/pause state."""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Callable, Protocol, Sequence

from albumplayer.errors import LoadError
from albumplayer.models import Album, Track

logger = logging.getLogger(__name__)


class SongHandle(Protocol):
    def play(self, looping: bool = False) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...


class PlaybackState(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class PlaybackController:
    """Owns the current album, the current track and the single active song.

    ``song_factory`` opens a handle for a track location. At most one handle is
    alive at a time: starting a track stops the previous handle.
    """

    def __init__(self, albums: Sequence[Album], song_factory: Callable[[Path], SongHandle]) -> None:
        if not albums:
            raise LoadError("The album catalog is empty")
        self._albums = tuple(albums)
        self._song_factory = song_factory
        self.current_album: int | None = None
        self.current_track: Track | None = None
        self.is_playing = False
        self._song: SongHandle | None = None

    @property
    def albums(self) -> tuple[Album, ...]:
        return self._albums

    @property
    def song(self) -> SongHandle | None:
        """The active audio handle, if a track has been started."""
        return self._song

    @property
    def selected_album(self) -> Album | None:
        if self.current_album is None:
            return None
        return self._albums[self.current_album]

    @property
    def state(self) -> PlaybackState:
        if self._song is None:
            return PlaybackState.STOPPED
        return PlaybackState.PLAYING if self.is_playing else PlaybackState.PAUSED

    def _check_album_index(self, index: int) -> None:
        if not 0 <= index < len(self._albums):
            raise IndexError(f"Album index {index} out of range (0..{len(self._albums) - 1})")

    def select_album(self, index: int) -> None:
        """Select an album and clear the track selection."""
        self._check_album_index(index)
        self.current_album = index
        self.current_track = None
        logger.debug("Selected album %d (%s)", index, self._albums[index].title)

    def select_track(self, track: Track, album_index: int) -> None:
        """Start ``track`` from ``album_index``, replacing any active song."""
        self._check_album_index(album_index)
        if self._albums[album_index].index_of(track) is None:
            raise ValueError(f"Track {track.title!r} is not on album {album_index}")
        self._play(track, album_index)

    def _play(self, track: Track, album_index: int) -> None:
        # Open first so a missing file leaves the selection untouched.
        song = self._song_factory(track.location)
        if self._song is not None:
            self._song.stop()
        song.play(False)
        self._song = song
        self.current_album = album_index
        self.current_track = track
        self.is_playing = True
        logger.info("Playing %s", track.title)

    def toggle_play_pause(self) -> None:
        """Pause the active song, or resume it when paused."""
        if self.current_track is None or self._song is None:
            logger.debug("Play/pause ignored, no track selected")
            return
        if self.is_playing:
            self._song.pause()
            self.is_playing = False
            logger.info("Paused")
        else:
            self._song.play(False)
            self.is_playing = True
            logger.info("Resumed")

    def skip_next(self) -> None:
        self._skip(1)

    def skip_previous(self) -> None:
        self._skip(-1)

    def _skip(self, step: int) -> None:
        album = self.selected_album
        if album is None:
            return
        index = album.index_of(self.current_track)
        if index is None:
            logger.debug("Skip ignored, no current track on %s", album.title)
            return
        target = index + step
        if not 0 <= target < len(album.tracks):
            logger.debug("Skip ignored, already at the edge of %s", album.title)
            return
        self._play(album.tracks[target], self.current_album)

    def next_album(self) -> None:
        """Move to the following album, wrapping to the first."""
        if self.current_album is None:
            self.select_album(0)
        else:
            self.select_album((self.current_album + 1) % len(self._albums))

    def previous_album(self) -> None:
        """Move to the preceding album, wrapping to the last."""
        if self.current_album is None:
            self.select_album(len(self._albums) - 1)
        else:
            self.select_album((self.current_album - 1) % len(self._albums))

    def close(self) -> None:
        if self._song is not None:
            self._song.stop()
        self._song = None
        self.is_playing = False
