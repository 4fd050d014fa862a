"""Application state shared by the input and render handlers."""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Sequence

from albumplayer.config import DEFAULT_CONFIG, PlayerConfig
from albumplayer.errors import ResourceError
from albumplayer.models import Album
from albumplayer.playback import PlaybackController
from albumplayer.ui.layout import (
    AlbumArtwork,
    HitTarget,
    Layout,
    NextButton,
    PlayPauseButton,
    PrevButton,
    TrackRow,
    hit_test,
)
from albumplayer.ui.render import Canvas, button_image_paths, render_frame

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    SPACE = "space"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class MusicPlayerApp:
    """Click handling, per-frame rendering and ticking for the player window.

    The host window owns no player logic; it forwards clicks, key presses and
    paint requests here. The first ``ResourceError`` ends the session: it is
    kept in ``error``, input and rendering stop, and the host re-raises it
    once its event loop has quit.
    """

    def __init__(
        self,
        albums: Sequence[Album],
        controller: PlaybackController,
        *,
        media_root: Path,
        layout: Layout | None = None,
        config: PlayerConfig = DEFAULT_CONFIG,
    ) -> None:
        self.albums = tuple(albums)
        self.controller = controller
        self.layout = layout or Layout()
        self.config = config
        self.buttons = button_image_paths(media_root, config)
        self.error: ResourceError | None = None

        for album in self.albums:
            if self.layout.track_list_overflows(len(album.tracks)):
                logger.warning(
                    "%s has %d tracks, only the first %d fit above the buttons",
                    album.title,
                    len(album.tracks),
                    self.layout.max_track_rows,
                )

    @property
    def failed(self) -> bool:
        return self.error is not None

    def _fail(self, exc: ResourceError) -> None:
        logger.debug("Stopping after %s", exc)
        self.error = exc

    def handle_click(self, x: float, y: float) -> HitTarget | None:
        """Apply a left click at window coordinates and return what was hit."""
        if self.failed:
            return None
        target = hit_test((x, y), self.layout, self.albums, self.controller.current_album)
        if target is None:
            return None

        logger.debug("Click at (%s, %s) hit %s", x, y, target)
        try:
            if isinstance(target, AlbumArtwork):
                self.controller.select_album(target.album_index)
            elif isinstance(target, TrackRow):
                album = self.albums[target.album_index]
                self.controller.select_track(album.tracks[target.track_index], target.album_index)
            elif isinstance(target, PlayPauseButton):
                self.controller.toggle_play_pause()
            elif isinstance(target, NextButton):
                self.controller.next_album()
            elif isinstance(target, PrevButton):
                self.controller.previous_album()
        except ResourceError as exc:
            self._fail(exc)
        return target

    def handle_key(self, key: Key) -> None:
        if self.failed:
            return
        try:
            if key is Key.SPACE:
                self.controller.toggle_play_pause()
            elif key is Key.RIGHT:
                self.controller.skip_next()
            elif key is Key.LEFT:
                self.controller.skip_previous()
            elif key is Key.DOWN:
                self.controller.next_album()
            elif key is Key.UP:
                self.controller.previous_album()
        except ResourceError as exc:
            self._fail(exc)

    def render(self, canvas: Canvas) -> None:
        if self.failed:
            return
        try:
            render_frame(
                canvas, self.albums, self.controller, self.layout, self.buttons, self.config
            )
        except ResourceError as exc:
            self._fail(exc)

    def tick(self) -> None:
        # Input drives every transition; nothing changes between frames.
        pass

    def close(self) -> None:
        self.controller.close()
