from __future__ import annotations

from pathlib import Path

import pytest

from albumplayer.models import Album, Artwork, Track
from albumplayer.ui.layout import (
    AlbumArtwork,
    Layout,
    NextButton,
    PlayPauseButton,
    PrevButton,
    Rect,
    TrackRow,
    hit_test,
)

LAYOUT = Layout()


def make_album(title: str, track_count: int) -> Album:
    return Album(
        title=title,
        artist="Artist",
        artwork=Artwork(Path(f"{title}.png"), 100, 100),
        tracks=tuple(Track(f"{title} {n}", Path(f"{title}{n}.mp3")) for n in range(track_count)),
    )


def test_rect_contains_edges() -> None:
    rect = Rect(10, 20, 30, 40)

    assert rect.contains(10, 20)
    assert rect.contains(40, 60)
    assert not rect.contains(9.5, 30)
    assert not rect.contains(20, 60.5)


def test_default_geometry() -> None:
    assert LAYOUT.artwork_rect(0) == Rect(50, 50, 100, 100)
    assert LAYOUT.artwork_rect(2) == Rect(450, 50, 100, 100)
    assert LAYOUT.title_position(1) == (250, 160)
    assert LAYOUT.track_row_rect(1) == Rect(50, 220, 550, 30)
    assert LAYOUT.play_button_rect == Rect(375, 450, 50, 50)
    assert LAYOUT.next_button_rect == Rect(500, 450, 50, 50)
    assert LAYOUT.prev_button_rect == Rect(250, 450, 50, 50)


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        ((60, 60), AlbumArtwork(0)),
        ((250, 150), AlbumArtwork(1)),
        ((400, 475), PlayPauseButton()),
        ((525, 450), NextButton()),
        ((250, 500), PrevButton()),
        ((5, 5), None),
        ((175, 100), None),
    ],
)
def test_hit_test_fixed_regions(point, expected) -> None:
    albums = [make_album("a", 2), make_album("b", 1)]

    assert hit_test(point, LAYOUT, albums, None) == expected


def test_track_rows_only_for_selected_album() -> None:
    albums = [make_album("a", 3), make_album("b", 3)]

    assert hit_test((100, 200), LAYOUT, albums, None) is None
    assert hit_test((100, 200), LAYOUT, albums, 0) == TrackRow(0, 0)
    assert hit_test((590, 260), LAYOUT, albums, 1) == TrackRow(1, 2)
    assert hit_test((100, 290), LAYOUT, albums, 1) is None


def test_shared_row_edge_goes_to_earlier_row() -> None:
    albums = [make_album("a", 3)]

    assert hit_test((100, 220), LAYOUT, albums, 0) == TrackRow(0, 0)


def test_artwork_wins_over_track_rows() -> None:
    layout = Layout(track_list_gap=-20)
    albums = [make_album("a", 2), make_album("b", 2)]

    # Row 0 of album b starts inside the artwork band.
    assert hit_test((260, 140), layout, albums, 1) == AlbumArtwork(1)
    assert hit_test((200, 140), layout, albums, 1) == TrackRow(1, 0)


def test_long_track_list_is_clamped_above_buttons() -> None:
    albums = [make_album("a", 12)]

    assert LAYOUT.max_track_rows == 8
    assert LAYOUT.visible_track_rows(12) == 8
    assert LAYOUT.visible_track_rows(3) == 3
    assert LAYOUT.track_list_overflows(12)
    assert not LAYOUT.track_list_overflows(8)
    assert hit_test((100, 425), LAYOUT, albums, 0) == TrackRow(0, 7)
    assert hit_test((400, 455), LAYOUT, albums, 0) == PlayPauseButton()


def test_artwork_hit_area_follows_cover_size() -> None:
    album = Album(
        title="small",
        artist="Artist",
        artwork=Artwork(Path("small.png"), 64, 48),
        tracks=(),
    )

    assert LAYOUT.artwork_rect(0, album.artwork) == Rect(50, 50, 64, 48)
    assert hit_test((110, 95), LAYOUT, [album], None) == AlbumArtwork(0)
    assert hit_test((120, 95), LAYOUT, [album], None) is None
    assert hit_test((60, 110), LAYOUT, [album], None) is None
