"""Command-line interface (CLI) for gensync."""

# pylint: disable=no-value-for-parameter
from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO, Callable, TypedDict

import click
from typing_extensions import Unpack

from gensync.output import symlink_dir, symlink_file, write_if_changed
from gensync.schemas import SyncSettings
from gensync.utils.exceptions import FilesystemError
from gensync.utils.logging_config import configure_logging, get_logger
from gensync.utils.path_utils import relativize_symlink_target

# Initialize logger for this module
logger = get_logger(__name__)


class _LinkArgs(TypedDict):
    source: str
    destination: str
    absolute: bool


_absolute_option = click.option(
    "--absolute",
    is_flag=True,
    default=False,
    help="Always use the absolute source path as the link target, as if GENSYNC_TARGET_DIR were set.",
)


@click.group()
def main() -> None:
    """Write generated files and links into a build output directory without needless rewrites."""
    configure_logging()


@main.command()
@click.argument("destination", type=click.Path())
@click.argument("source", type=click.File("rb"), default="-")
def write(destination: str, source: BinaryIO) -> None:
    """Write SOURCE (default: stdin) to DESTINATION unless DESTINATION already holds the same bytes."""
    _run(write_if_changed, destination, source.read())


@main.command("link-file")
@click.argument("source", type=str)
@click.argument("destination", type=str)
@_absolute_option
def link_file(**cli_kwargs: Unpack[_LinkArgs]) -> None:
    """Make DESTINATION a symlink to the file SOURCE (a copy where symlinks are unavailable)."""
    _run(symlink_file, cli_kwargs["source"], cli_kwargs["destination"], settings=_settings(cli_kwargs))


@main.command("link-dir")
@click.argument("source", type=str)
@click.argument("destination", type=str)
@_absolute_option
def link_dir(**cli_kwargs: Unpack[_LinkArgs]) -> None:
    """Make DESTINATION a symlink to the directory SOURCE (a copy where symlinks are unavailable)."""
    _run(symlink_dir, cli_kwargs["source"], cli_kwargs["destination"], settings=_settings(cli_kwargs))


@main.command()
@click.argument("source", type=str)
@click.argument("destination", type=str)
@_absolute_option
def relativize(**cli_kwargs: Unpack[_LinkArgs]) -> None:
    """Print the target a symlink at DESTINATION pointing to SOURCE would be given."""
    target = relativize_symlink_target(
        Path(cli_kwargs["source"]),
        Path(cli_kwargs["destination"]),
        target_dir_redirected=_settings(cli_kwargs).target_dir_redirected,
    )
    click.echo(str(target))


def _settings(cli_kwargs: _LinkArgs) -> SyncSettings:
    """Return the environment settings, forcing absolute targets when ``--absolute`` was given."""
    settings = SyncSettings.from_env()
    if cli_kwargs["absolute"]:
        settings = settings.model_copy(update={"target_dir_redirected": True})
    return settings


def _run(operation: Callable[..., None], *args: Any, **kwargs: Any) -> None:
    """Run ``operation`` and turn a ``FilesystemError`` into a non-zero exit status.

    Raises
    ------
    Abort
        If the operation fails, after the error has been printed to ``stderr``.

    """
    try:
        operation(*args, **kwargs)
    except FilesystemError as exc:
        logger.debug("Operation failed", extra={"operation": operation.__name__, "error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise click.Abort from exc


if __name__ == "__main__":
    main()
