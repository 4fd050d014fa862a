"""Catalog data model."""

from .album import Album, Artwork, Track

__all__ = ["Album", "Artwork", "Track"]
