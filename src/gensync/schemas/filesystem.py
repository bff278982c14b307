"""Schema for classifying what occupies a path on disk."""

from __future__ import annotations

import os
import stat
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class NodeKind(Enum):
    """Enum representing what a path refers to at the moment it is observed."""

    ABSENT = auto()
    FILE = auto()
    DIRECTORY = auto()
    SYMLINK_TO_FILE = auto()
    SYMLINK_TO_DIRECTORY = auto()
    DANGLING_SYMLINK = auto()

    @property
    def is_symlink(self) -> bool:
        """Return ``True`` for every kind of symlink, dangling or not."""
        return self in {NodeKind.SYMLINK_TO_FILE, NodeKind.SYMLINK_TO_DIRECTORY, NodeKind.DANGLING_SYMLINK}

    @property
    def is_directory(self) -> bool:
        """Return ``True`` if the node is a directory or resolves to one."""
        return self in {NodeKind.DIRECTORY, NodeKind.SYMLINK_TO_DIRECTORY}


def classify_node(path: Path) -> NodeKind:
    """Classify the node at ``path`` without following a symlink at ``path`` itself.

    A symlink is reported by what it points to, which requires following it; a link whose target cannot be
    inspected is reported as ``DANGLING_SYMLINK``.

    Parameters
    ----------
    path : Path
        The path to inspect.

    Returns
    -------
    NodeKind
        The kind of node at ``path``, or ``NodeKind.ABSENT`` if nothing is there.

    """
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return NodeKind.ABSENT

    if not stat.S_ISLNK(mode):
        return NodeKind.DIRECTORY if stat.S_ISDIR(mode) else NodeKind.FILE

    try:
        target_mode = os.stat(path).st_mode
    except OSError:
        return NodeKind.DANGLING_SYMLINK
    return NodeKind.SYMLINK_TO_DIRECTORY if stat.S_ISDIR(target_mode) else NodeKind.SYMLINK_TO_FILE
