"""Album catalog loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from albumplayer.config import DEFAULT_CONFIG
from albumplayer.errors import LoadError
from albumplayer.models import Album, Artwork, Track

logger = logging.getLogger(__name__)


class _LineReader:
    """Hands out catalog lines one at a time and remembers the line number."""

    def __init__(self, source: Path, lines: list[str]) -> None:
        self._source = source
        self._lines: Iterator[str] = iter(lines)
        self.line_number = 0

    def next_value(self, what: str) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise LoadError(
                f"{self._source}: unexpected end of file at line {self.line_number + 1}, "
                f"expected {what}"
            ) from None
        self.line_number += 1
        return line.strip()

    def next_count(self, what: str) -> int:
        raw = self.next_value(what)
        if not (raw.isascii() and raw.isdigit()):
            raise LoadError(f"{self._source}:{self.line_number}: expected {what}, got {raw!r}")
        return int(raw)


class CatalogLoader:
    """Read albums and tracks from a line oriented catalog file.

    The file starts with the number of albums. Each album is described by its
    title, artist, artwork file name and track count, followed by a title line
    and a file line per track. Blank lines are values, not separators.
    """

    def __init__(
        self,
        source: Path | str,
        *,
        media_root: Path | str | None = None,
        artwork_size: tuple[int, int] = (100, 100),
        images_dir: str = DEFAULT_CONFIG.images_dir,
        tracks_dir: str = DEFAULT_CONFIG.tracks_dir,
    ) -> None:
        self.source = Path(source)
        self.media_root = Path(media_root) if media_root is not None else self.source.parent
        self.artwork_size = artwork_size
        self.images_dir = images_dir
        self.tracks_dir = tracks_dir

    def _read_lines(self) -> list[str]:
        if not self.source.is_file():
            raise LoadError(f"Album catalog not found: {self.source}")
        try:
            return self.source.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(f"Could not read album catalog {self.source}: {exc}") from exc

    def load_albums(self) -> tuple[Album, ...]:
        """Return the albums in file order."""
        reader = _LineReader(self.source, self._read_lines())
        album_count = reader.next_count("album count")

        albums: list[Album] = []
        for _ in range(album_count):
            albums.append(self._read_album(reader))

        logger.info("Loaded %d album(s) from %s", len(albums), self.source)
        return tuple(albums)

    def _read_album(self, reader: _LineReader) -> Album:
        title = reader.next_value("album title")
        artist = reader.next_value("album artist")
        artwork_file = reader.next_value("artwork file")
        track_count = reader.next_count("track count")

        tracks: list[Track] = []
        for _ in range(track_count):
            track_title = reader.next_value("track title")
            track_file = reader.next_value("track file")
            tracks.append(
                Track(
                    title=track_title,
                    location=self.media_root / self.tracks_dir / track_file,
                )
            )

        width, height = self.artwork_size
        logger.debug("Album %r by %r with %d track(s)", title, artist, len(tracks))
        return Album(
            title=title,
            artist=artist,
            artwork=Artwork(
                path=self.media_root / self.images_dir / artwork_file,
                width=width,
                height=height,
            ),
            tracks=tuple(tracks),
        )


def load_catalog(
    source: Path | str,
    *,
    media_root: Path | str | None = None,
    artwork_size: tuple[int, int] = (100, 100),
) -> tuple[Album, ...]:
    """Shortcut for ``CatalogLoader(source, ...).load_albums()``."""
    return CatalogLoader(source, media_root=media_root, artwork_size=artwork_size).load_albums()
