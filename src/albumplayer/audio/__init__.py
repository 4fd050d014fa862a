"""Audio helpers for albumplayer."""

from .song import Song, SongFactory

__all__ = ["Song", "SongFactory"]
