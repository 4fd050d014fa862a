"""Streaming song playback built around pygame."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from albumplayer.errors import ResourceError

logger = logging.getLogger(__name__)


class Song:
    """One streamed audio file played through ``pygame.mixer.music``.

    pygame only streams a single music file at a time, so a ``Song`` is the
    handle for whatever is currently loaded. ``play`` resumes a paused song
    instead of restarting it.
    """

    def __init__(self, location: Path | str, *, mixer: pygame.mixer = pygame.mixer) -> None:
        self._mixer = mixer
        if not self._mixer.get_init():
            self._mixer.init()

        self.location = Path(location)
        self._paused = False
        self._started = False
        try:
            self._mixer.music.load(self.location.as_posix())
        except (pygame.error, FileNotFoundError) as exc:
            raise ResourceError(self.location, str(exc)) from exc

    def play(self, looping: bool = False) -> None:
        """Start the song, or resume it when paused."""
        if self._paused:
            self._mixer.music.unpause()
            self._paused = False
            return
        self._mixer.music.play(loops=-1 if looping else 0)
        self._started = True

    def pause(self) -> None:
        if not self._started or self._paused:
            return
        self._mixer.music.pause()
        self._paused = True

    def stop(self) -> None:
        """Stop playback; a later ``play`` starts from the beginning."""
        if self._started:
            self._mixer.music.stop()
        self._started = False
        self._paused = False


class SongFactory:
    """Open ``Song`` handles against a shared mixer."""

    def __init__(self, *, mixer: pygame.mixer = pygame.mixer) -> None:
        self._mixer = mixer

    def __call__(self, location: Path) -> Song:
        logger.debug("Opening %s", location)
        return Song(location, mixer=self._mixer)

    def close(self) -> None:
        """Tear down pygame mixer resources."""
        if self._mixer.get_init():
            self._mixer.music.stop()
            self._mixer.quit()
