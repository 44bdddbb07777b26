"""
Command-line interface for hearitfresh.

Commands:
    hearitfresh curate ARTIST... [--mode new|old]   Build a playlist from artists
    hearitfresh top [--limit N]                     Build a playlist from your top artists
    hearitfresh clear PLAYLIST_ID                   Remove the tracks of a playlist

Global options:
    --config PATH     Path to config.yaml (default: ./config.yaml)
    --verbose, -v     Show DEBUG messages on the console

Usage:
    hearitfresh curate "The Beatles" "Queen"
    hearitfresh curate Radiohead --mode old
    hearitfresh top --limit 5
"""

import functools
import sys
from pathlib import Path

import click

from hearitfresh import __version__
from hearitfresh.core import (
    Config,
    HearItFreshError,
    get_logger,
    load_config,
    setup_logging,
    shutdown_logging,
)
from hearitfresh.curation import (
    PlaylistAssembler,
    clear_playlist,
    curate_playlist,
    top_artist_names,
)
from hearitfresh.spotify import CurationResult, SpotifyCatalog

logger = get_logger(__name__)


def handle_error(func):
    """
    Decorator turning application errors into a red message and exit code.

    HearItFreshError and ValueError exit with 1, Ctrl+C with 130.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo(click.style("\n\nOperation cancelled by user", fg="yellow"))
            sys.exit(130)
        except (HearItFreshError, ValueError) as e:
            logger.debug(f"Command failed: {e!r}")
            click.echo(click.style(f"Error: {e}", fg="red"), err=True)
            sys.exit(1)
    return wrapper


def _load_configuration(ctx: click.Context) -> Config:
    """
    Load config.yaml and set up logging for the running command.

    Called from the command bodies, so `--help` works without credentials.

    Raises:
        ConfigError: If configuration is invalid or missing.
    """
    config = load_config(ctx.obj["config_path"])
    level = "DEBUG" if ctx.obj["verbose"] else config.logging.level
    setup_logging(config.logging.directory, level)
    ctx.call_on_close(shutdown_logging)
    return config


def _connect(config: Config) -> SpotifyCatalog:
    return SpotifyCatalog.connect(config.spotify)


def _report(result: CurationResult) -> None:
    click.echo(click.style(
        f"Added {result.track_count} tracks to {result.playlist.name}", fg="green"
    ))
    click.echo(result.playlist.link)
    if result.skipped_artists:
        click.echo(click.style(
            f"Skipped: {', '.join(result.skipped_artists)}", fg="yellow"
        ))


@click.group()
@click.version_option(__version__, prog_name="hearitfresh")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Path to config.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, config_path, verbose):
    """
    HearItFresh - curate Spotify playlists from your favourite artists.

    Picks a few studio albums per artist, drops remixes, live recordings
    and repeated titles, and puts the rest into a new public playlist.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("artists", nargs=-1, required=True)
@click.option("--mode", type=click.Choice(["new", "old"]), default="new", show_default=True,
              help="'new' to discover, 'old' for favourites (playlist description)")
@click.pass_context
@handle_error
def curate(ctx, artists, mode):
    """Create a playlist from the albums of ARTISTS."""
    config = _load_configuration(ctx)
    catalog = _connect(config)

    result = curate_playlist(
        list(artists),
        catalog,
        mode,
        album_batch_size=config.curation.album_batch_size,
        track_batch_size=config.curation.track_batch_size,
        show_progress=True,
    )
    _report(result)


@cli.command()
@click.option("--limit", type=click.IntRange(1, 50), default=10, show_default=True,
              help="How many top artists to use")
@click.pass_context
@handle_error
def top(ctx, limit):
    """Create a playlist from your own top artists."""
    config = _load_configuration(ctx)
    catalog = _connect(config)

    artists = top_artist_names(catalog, limit=limit)
    if not artists:
        click.echo(click.style("No top artists found for this account", fg="yellow"))
        return

    click.echo(f"Top artists: {', '.join(artists)}")
    result = curate_playlist(
        artists,
        catalog,
        "old",
        album_batch_size=config.curation.album_batch_size,
        track_batch_size=config.curation.track_batch_size,
        show_progress=True,
    )
    _report(result)


@cli.command()
@click.argument("playlist_id")
@click.pass_context
@handle_error
def clear(ctx, playlist_id):
    """Remove the tracks of PLAYLIST_ID (best effort)."""
    config = _load_configuration(ctx)
    assembler = PlaylistAssembler(_connect(config))

    if clear_playlist(assembler, playlist_id, batch_size=config.curation.track_batch_size):
        click.echo(click.style("Playlist cleared", fg="green"))
    else:
        click.echo(click.style("Some tracks could not be removed, see log", fg="yellow"))
        sys.exit(1)


if __name__ == "__main__":
    cli()
