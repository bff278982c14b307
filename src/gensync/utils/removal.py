"""Best-effort removal of whatever currently occupies a destination path.

Removal only prepares a path for a following write or link creation, so failures are never raised: if the path
could not be cleared, the operation that follows fails and reports the real problem.

Two strategies exist because platforms disagree on how symlinks are deleted:

* On Windows a symlink takes the type of its target; a link to a directory must be removed as a directory and a
  link to a file as a file. ``remove_by_target_type`` classifies the node by what it points to.
* Elsewhere every symlink is removed as a file. ``remove_by_link_type`` classifies the node itself so a link to
  a directory is unlinked rather than walked.
"""

from __future__ import annotations

import contextlib
import os
import platform
import shutil
from typing import TYPE_CHECKING, Callable, Iterator

from gensync.schemas.filesystem import NodeKind, classify_node
from gensync.utils.logging_config import get_logger

if TYPE_CHECKING:
    from pathlib import Path

SYMLINKS_INHERIT_TARGET_TYPE = platform.system() == "Windows"

logger = get_logger(__name__)


def remove_by_target_type(path: Path) -> None:
    """Remove ``path``, choosing file or directory removal from what a symlink points to.

    A dangling symlink gives no hint about its kind, so directory removal is attempted first and file removal
    second.

    Parameters
    ----------
    path : Path
        The path to clear.

    """
    kind = classify_node(path)
    if kind is NodeKind.ABSENT:
        return

    with _suppressed(path):
        if kind is NodeKind.DANGLING_SYMLINK:
            try:
                _remove_dir(path, kind)
            except OSError:
                os.remove(path)
        elif kind.is_directory:
            _remove_dir(path, kind)
        else:
            os.remove(path)


def remove_by_link_type(path: Path) -> None:
    """Remove ``path``, treating every symlink as a file regardless of its target.

    Parameters
    ----------
    path : Path
        The path to clear.

    """
    kind = classify_node(path)
    if kind is NodeKind.ABSENT:
        return

    with _suppressed(path):
        if kind is NodeKind.DIRECTORY:
            shutil.rmtree(path)
        else:
            os.remove(path)


_STRATEGY: Callable[[Path], None] = remove_by_target_type if SYMLINKS_INHERIT_TARGET_TYPE else remove_by_link_type


def best_effort_remove(path: Path) -> None:
    """Remove the file, directory or symlink at ``path`` if there is one, never raising."""
    _STRATEGY(path)


def _remove_dir(path: Path, kind: NodeKind) -> None:
    # shutil.rmtree refuses symlinks; a directory link is removed on its own with rmdir
    if kind.is_symlink:
        os.rmdir(path)
    else:
        shutil.rmtree(path)


@contextlib.contextmanager
def _suppressed(path: Path) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        logger.debug("Ignoring failure to remove path", extra={"path": str(path), "error": str(exc)})
