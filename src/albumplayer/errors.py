"""Exception hierarchy for albumplayer."""

from __future__ import annotations


class PlayerError(Exception):
    """Base class for errors raised by albumplayer."""


class LoadError(PlayerError):
    """The album catalog is missing, unreadable, malformed or empty."""


class ResourceError(PlayerError):
    """An image or audio file could not be opened by the media layer."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
