"""Playback state handling."""

from .controller import PlaybackController, PlaybackState

__all__ = ["PlaybackController", "PlaybackState"]
