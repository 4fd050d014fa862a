"""Command-line entry point for albumplayer."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from albumplayer.audio import SongFactory
from albumplayer.config import DEFAULT_CONFIG
from albumplayer.errors import LoadError, ResourceError
from albumplayer.library import CatalogLoader
from albumplayer.playback import PlaybackController
from albumplayer.ui.app import PlayerApp
from albumplayer.ui.state import MusicPlayerApp


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "catalog_path",
    metavar="CATALOG",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG.default_catalog,
)
@click.option(
    "--list",
    "list_only",
    is_flag=True,
    default=False,
    help="Print the catalog without opening the player window.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def main(catalog_path: Path, list_only: bool, verbose: bool) -> None:
    """Load an album catalog and launch the music player."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    loader = CatalogLoader(catalog_path)
    try:
        albums = loader.load_albums()
        if not albums:
            raise LoadError(f"{catalog_path}: the album catalog is empty")
    except LoadError as exc:
        raise click.ClickException(str(exc)) from exc

    if list_only:
        _print_albums(albums)
        return

    songs = SongFactory()
    controller = PlaybackController(albums, songs)
    state = MusicPlayerApp(albums, controller, media_root=loader.media_root)
    try:
        PlayerApp(state=state, on_exit=songs.close).run()
    except ResourceError as exc:
        raise click.ClickException(str(exc)) from exc


def _print_albums(albums) -> None:
    for index, album in enumerate(albums, start=1):
        click.echo(f"{index}. {album.label} [{album.artwork.path.name}]")
        for track_index, track in enumerate(album.tracks, start=1):
            click.echo(f"   {track_index}. {track.title} [{track.location.name}]")


if __name__ == "__main__":
    main()
