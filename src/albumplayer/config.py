"""Static application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PlayerConfig:
    """Window and media settings for the player."""

    window_width: int = 800
    window_height: int = 600
    window_title: str = "Music Player"
    default_catalog: str = "albums.txt"
    images_dir: str = "images"
    tracks_dir: str = "tracks"
    buttons_dir: str = "button"
    play_button: str = "playbtn.png"
    pause_button: str = "pausebtn.png"
    next_button: str = "nextbtn.png"
    prev_button: str = "prevbtn.png"
    track_font_size: int = 20
    album_font_size: int = 16


DEFAULT_CONFIG = PlayerConfig()
