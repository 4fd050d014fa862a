"""Album catalog helpers."""

from .loader import CatalogLoader, load_catalog

__all__ = ["CatalogLoader", "load_catalog"]
