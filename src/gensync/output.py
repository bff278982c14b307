"""Materialize generated files and links into an output directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from gensync.schemas.settings import SyncSettings
from gensync.utils import fs
from gensync.utils.exceptions import FilesystemError
from gensync.utils.logging_config import get_logger
from gensync.utils.path_utils import relativize_symlink_target
from gensync.utils.removal import best_effort_remove

if TYPE_CHECKING:
    from os import PathLike
    from typing import Callable

# Initialize logger for this module
logger = get_logger(__name__)


def write_if_changed(path: str | PathLike[str], content: bytes) -> None:
    """Write ``content`` to ``path`` unless the file already holds exactly those bytes.

    Leaving an up-to-date file untouched keeps its modification time, so build tools watching the output do not
    rebuild everything that depends on it.

    Parameters
    ----------
    path : str | PathLike[str]
        The file to write. Missing parent directories are created.
    content : bytes
        The desired file content.

    Raises
    ------
    FilesystemError
        If the file cannot be written. When creating the parent directory failed as well, that error is raised
        instead since it is the more likely root cause.

    """
    path = Path(path)
    create_dir_error: FilesystemError | None = None

    if fs.exists(path):
        try:
            existing = fs.read(path)
        except FilesystemError:
            existing = None
        if existing == content:
            logger.debug("Content unchanged, skipping write", extra={"path": str(path)})
            return
        best_effort_remove(path)
    else:
        create_dir_error = _try_create_parent(path)

    try:
        fs.write(path, content)
    except FilesystemError:
        if create_dir_error is not None:
            raise create_dir_error
        raise

    logger.debug("Wrote file", extra={"path": str(path), "size": len(content)})


def symlink_file(
    source: str | PathLike[str],
    destination: str | PathLike[str],
    *,
    settings: SyncSettings | None = None,
) -> None:
    """Make ``destination`` a symlink to the file ``source``, or a copy of it where symlinks are unavailable.

    Parameters
    ----------
    source : str | PathLike[str]
        The file the link should resolve to.
    destination : str | PathLike[str]
        Where to create the link. Anything already there is replaced.
    settings : SyncSettings | None
        Settings controlling the link target. If ``None``, they are read from the environment.

    Raises
    ------
    FilesystemError
        If the link cannot be created. A link created concurrently at ``destination`` by another build is not an
        error.

    """
    _link(Path(source), Path(destination), settings=settings, create=fs.symlink_or_copy)


def symlink_dir(
    source: str | PathLike[str],
    destination: str | PathLike[str],
    *,
    settings: SyncSettings | None = None,
) -> None:
    """Make ``destination`` a symlink to the directory ``source``, or a copy of it where symlinks are unavailable.

    See ``symlink_file`` for the parameters and the errors raised.
    """
    _link(Path(source), Path(destination), settings=settings, create=fs.symlink_dir_or_copy)


def _link(
    source: Path,
    destination: Path,
    *,
    settings: SyncSettings | None,
    create: Callable[[Path, Path], None],
) -> None:
    if settings is None:
        settings = SyncSettings.from_env()

    target = relativize_symlink_target(
        source,
        destination,
        target_dir_redirected=settings.target_dir_redirected,
    )

    create_dir_error: FilesystemError | None = None
    if fs.exists(destination):
        best_effort_remove(destination)
    else:
        create_dir_error = _try_create_parent(destination)

    try:
        create(target, destination)
    except FilesystemError as exc:
        if exc.already_exists:
            # Another build step running at the same time created this link first. A destination path in the
            # output tree always means the same thing, so the existing link is the one we wanted.
            logger.debug("Link already created concurrently", extra={"path": str(destination)})
            return
        if create_dir_error is not None:
            raise create_dir_error
        raise

    logger.debug("Created link", extra={"path": str(destination), "target": str(target)})


def _try_create_parent(path: Path) -> FilesystemError | None:
    """Create the parent directories of ``path`` and return the error instead of raising it."""
    try:
        fs.create_dir_all(path.parent)
    except FilesystemError as exc:
        return exc
    return None
