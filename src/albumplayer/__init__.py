"""Album based desktop music player."""

__version__ = "0.1.0"
