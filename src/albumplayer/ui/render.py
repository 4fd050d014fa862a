"""Frame rendering, independent of the drawing backend."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Protocol, Sequence

from albumplayer.config import DEFAULT_CONFIG, PlayerConfig
from albumplayer.models import Album
from albumplayer.playback import PlaybackController
from albumplayer.ui.layout import Layout, Rect

TOP_COLOR = "#1eb1fa"
BOTTOM_COLOR = "#1d4db5"
LABEL_COLOR = "#ffffff"
HIGHLIGHT_COLOR = "#ffff00"
NOW_PLAYING_COLOR = "#00ff00"


class ZOrder(enum.IntEnum):
    BACKGROUND = 0
    PLAYER = 1
    UI = 2


class Canvas(Protocol):
    """Drawing primitives the host window provides."""

    def draw_rect(self, rect: Rect, color: str, z: ZOrder) -> None: ...

    def draw_image(self, path: Path, rect: Rect, z: ZOrder) -> None: ...

    def draw_text(
        self, text: str, x: float, y: float, size: int, color: str, z: ZOrder
    ) -> None: ...


def button_image_paths(media_root: Path, config: PlayerConfig = DEFAULT_CONFIG) -> dict[str, Path]:
    buttons = media_root / config.images_dir / config.buttons_dir
    return {
        "play": buttons / config.play_button,
        "pause": buttons / config.pause_button,
        "next": buttons / config.next_button,
        "prev": buttons / config.prev_button,
    }


def render_frame(
    canvas: Canvas,
    albums: Sequence[Album],
    controller: PlaybackController,
    layout: Layout,
    buttons: dict[str, Path],
    config: PlayerConfig = DEFAULT_CONFIG,
) -> None:
    """Draw one frame from the current catalog and playback state."""
    width, height = config.window_width, config.window_height
    canvas.draw_rect(Rect(0, 0, width, height / 2), TOP_COLOR, ZOrder.BACKGROUND)
    canvas.draw_rect(Rect(0, height / 2, width, height / 2), BOTTOM_COLOR, ZOrder.BACKGROUND)

    for index, album in enumerate(albums):
        cover = layout.artwork_rect(index, album.artwork)
        canvas.draw_image(album.artwork.path, cover, ZOrder.PLAYER)
        label_x, label_y = layout.title_position(index)
        canvas.draw_text(
            album.label, label_x, label_y, config.album_font_size, LABEL_COLOR, ZOrder.UI
        )
        if index == controller.current_album:
            _draw_track_list(canvas, album, controller, layout, config)

    if controller.current_track is not None:
        canvas.draw_text(
            f"Now playing: {controller.current_track.title}",
            layout.now_playing_x,
            layout.now_playing_y,
            config.track_font_size,
            NOW_PLAYING_COLOR,
            ZOrder.UI,
        )

    play_icon = buttons["pause"] if controller.is_playing else buttons["play"]
    canvas.draw_image(play_icon, layout.play_button_rect, ZOrder.UI)
    canvas.draw_image(buttons["next"], layout.next_button_rect, ZOrder.UI)
    canvas.draw_image(buttons["prev"], layout.prev_button_rect, ZOrder.UI)


def _draw_track_list(
    canvas: Canvas,
    album: Album,
    controller: PlaybackController,
    layout: Layout,
    config: PlayerConfig,
) -> None:
    visible = layout.visible_track_rows(len(album.tracks))
    for track_index, track in enumerate(album.tracks[:visible]):
        row = layout.track_row_rect(track_index)
        color = HIGHLIGHT_COLOR if track is controller.current_track else LABEL_COLOR
        canvas.draw_text(track.title, row.x, row.y, config.track_font_size, color, ZOrder.PLAYER)

    if layout.track_list_overflows(len(album.tracks)):
        hidden = len(album.tracks) - visible
        last = layout.track_row_rect(visible - 1) if visible else layout.track_row_rect(0)
        canvas.draw_text(
            f"+{hidden} more",
            layout.row_right,
            last.y,
            config.album_font_size,
            LABEL_COLOR,
            ZOrder.PLAYER,
        )
