"""Thin wrappers around the filesystem primitives used by gensync.

Every failure is re-raised as ``FilesystemError`` with the operation and path that failed, so callers only ever
have to handle a single error kind.
"""

from __future__ import annotations

import os
import platform
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from gensync.utils.exceptions import FilesystemError

if TYPE_CHECKING:
    from typing import Callable

_SYMLINKS_MAY_BE_UNAVAILABLE = platform.system() == "Windows"  # e.g. no developer mode or missing privilege


def exists(path: Path) -> bool:
    """Return ``True`` if anything occupies ``path``, including a dangling symlink."""
    return os.path.lexists(path)


def read(path: Path) -> bytes:
    """Read the full content of ``path``, following symlinks.

    Parameters
    ----------
    path : Path
        The file to read.

    Returns
    -------
    bytes
        The file content.

    Raises
    ------
    FilesystemError
        If the file cannot be read.

    """
    try:
        return path.read_bytes()
    except OSError as exc:
        msg = f"Failed to read file `{path}`"
        raise FilesystemError(msg, exc) from exc


def write(path: Path, content: bytes) -> None:
    """Write ``content`` to ``path``, replacing any previous content.

    Raises
    ------
    FilesystemError
        If the file cannot be written.

    """
    try:
        path.write_bytes(content)
    except OSError as exc:
        msg = f"Failed to write file `{path}`"
        raise FilesystemError(msg, exc) from exc


def create_dir_all(path: Path) -> None:
    """Ensure the directory exists, creating it and any missing parents if necessary.

    Parameters
    ----------
    path : Path
        The directory to create.

    Raises
    ------
    FilesystemError
        If the directory cannot be created.

    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Failed to create directory `{path}`"
        raise FilesystemError(msg, exc) from exc


def symlink_or_copy(target: Path, link: Path) -> None:
    """Create ``link`` as a symlink to the file ``target``, copying it where symlinks are unavailable.

    Parameters
    ----------
    target : Path
        The link target. A relative target is interpreted relative to the directory containing ``link``.
    link : Path
        Where to create the symlink or copy.

    Raises
    ------
    FilesystemError
        If neither a symlink nor a copy could be created. An existing ``link`` is reported as such and is never
        replaced by the copy fallback.

    """
    try:
        link.symlink_to(target)
    except FileExistsError as exc:
        msg = f"Failed to create symlink `{link}` pointing to `{target}`"
        raise FilesystemError(msg, exc) from exc
    except OSError as exc:
        if not _SYMLINKS_MAY_BE_UNAVAILABLE:
            msg = f"Failed to create symlink `{link}` pointing to `{target}`"
            raise FilesystemError(msg, exc) from exc
        _copy(_resolve_target(target, link), link, copy_func=shutil.copy2)


def symlink_dir_or_copy(target: Path, link: Path) -> None:
    """Create ``link`` as a symlink to the directory ``target``, copying the tree where symlinks are unavailable.

    Raises
    ------
    FilesystemError
        If neither a symlink nor a copy could be created.

    """
    try:
        link.symlink_to(target, target_is_directory=True)
    except FileExistsError as exc:
        msg = f"Failed to create directory symlink `{link}` pointing to `{target}`"
        raise FilesystemError(msg, exc) from exc
    except OSError as exc:
        if not _SYMLINKS_MAY_BE_UNAVAILABLE:
            msg = f"Failed to create directory symlink `{link}` pointing to `{target}`"
            raise FilesystemError(msg, exc) from exc
        _copy(_resolve_target(target, link), link, copy_func=shutil.copytree)


def _resolve_target(target: Path, link: Path) -> Path:
    """Return ``target`` as seen from the directory containing ``link``."""
    return target if target.is_absolute() else link.parent / target


def _copy(source: Path, destination: Path, *, copy_func: Callable[[Path, Path], object]) -> None:
    try:
        copy_func(source, destination)
    except OSError as exc:
        msg = f"Failed to copy `{source}` to `{destination}`"
        raise FilesystemError(msg, exc) from exc
