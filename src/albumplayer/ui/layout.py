"""Fixed screen geometry and click hit-testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from albumplayer.models import Album, Artwork


@dataclass(slots=True, frozen=True)
class Rect:
    """Axis aligned rectangle; ``contains`` includes every edge."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom


@dataclass(slots=True, frozen=True)
class AlbumArtwork:
    album_index: int


@dataclass(slots=True, frozen=True)
class TrackRow:
    album_index: int
    track_index: int


@dataclass(slots=True, frozen=True)
class PlayPauseButton:
    pass


@dataclass(slots=True, frozen=True)
class NextButton:
    pass


@dataclass(slots=True, frozen=True)
class PrevButton:
    pass


HitTarget = Union[AlbumArtwork, TrackRow, PlayPauseButton, NextButton, PrevButton]


@dataclass(slots=True, frozen=True)
class Layout:
    """Window geometry.

    Albums sit in one row from ``origin``, ``album_spacing`` apart. The selected
    album's tracks are listed below the row, one ``row_height`` line each, and
    the transport buttons share the strip at ``button_y``.
    """

    origin_x: int = 50
    origin_y: int = 50
    artwork_width: int = 100
    artwork_height: int = 100
    album_spacing: int = 200
    title_y_offset: int = 110
    track_list_gap: int = 40
    row_height: int = 30
    row_left: int = 50
    row_right: int = 600
    button_width: int = 50
    button_height: int = 50
    button_y: int = 450
    play_button_x: int = 375
    next_button_x: int = 500
    prev_button_x: int = 250
    now_playing_x: int = 50
    now_playing_y: int = 550

    def artwork_rect(self, album_index: int, artwork: Artwork | None = None) -> Rect:
        """Slot for an album cover, sized by ``artwork`` when given."""
        return Rect(
            self.origin_x + album_index * self.album_spacing,
            self.origin_y,
            artwork.width if artwork is not None else self.artwork_width,
            artwork.height if artwork is not None else self.artwork_height,
        )

    def title_position(self, album_index: int) -> tuple[int, int]:
        return (
            self.origin_x + album_index * self.album_spacing,
            self.origin_y + self.title_y_offset,
        )

    @property
    def track_list_top(self) -> int:
        return self.origin_y + self.artwork_height + self.track_list_gap

    def track_row_rect(self, track_index: int) -> Rect:
        return Rect(
            self.row_left,
            self.track_list_top + track_index * self.row_height,
            self.row_right - self.row_left,
            self.row_height,
        )

    @property
    def max_track_rows(self) -> int:
        """Number of rows that fit above the button strip."""
        available = self.button_y - self.track_list_top
        return max(0, available // self.row_height)

    def visible_track_rows(self, track_count: int) -> int:
        return min(track_count, self.max_track_rows)

    def track_list_overflows(self, track_count: int) -> bool:
        return track_count > self.max_track_rows

    @property
    def play_button_rect(self) -> Rect:
        return Rect(self.play_button_x, self.button_y, self.button_width, self.button_height)

    @property
    def next_button_rect(self) -> Rect:
        return Rect(self.next_button_x, self.button_y, self.button_width, self.button_height)

    @property
    def prev_button_rect(self) -> Rect:
        return Rect(self.prev_button_x, self.button_y, self.button_width, self.button_height)


def hit_test(
    point: tuple[float, float],
    layout: Layout,
    albums: Sequence[Album],
    current_album: int | None,
) -> HitTarget | None:
    """Resolve a click to the element under it.

    Albums are scanned left to right, each artwork before the track rows of the
    selected album, and the buttons last. The first match wins.
    """
    px, py = point
    for album_index, album in enumerate(albums):
        if layout.artwork_rect(album_index, album.artwork).contains(px, py):
            return AlbumArtwork(album_index)
        if album_index != current_album:
            continue
        for track_index in range(layout.visible_track_rows(len(album.tracks))):
            if layout.track_row_rect(track_index).contains(px, py):
                return TrackRow(album_index, track_index)

    if layout.play_button_rect.contains(px, py):
        return PlayPauseButton()
    if layout.next_button_rect.contains(px, py):
        return NextButton()
    if layout.prev_button_rect.contains(px, py):
        return PrevButton()
    return None
