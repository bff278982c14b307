"""Utility functions for computing symlink targets."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import TypeVar

PathT = TypeVar("PathT", bound=PurePath)


def relativize_symlink_target(source: PathT, destination: PurePath, *, target_dir_redirected: bool = False) -> PathT:
    """Return the target to store in a symlink at ``destination`` that points to ``source``.

    A relative target is only worth having when both paths live under a directory that is meaningful to the
    user. ``/code/lib/src/lib.h`` and ``/code/lib/out/include/lib.h`` share ``/code/lib``: moving ``lib`` keeps a
    relative link working, and whoever moves ``out`` out of ``lib`` expects it to break. ``/code/lib/src/lib.h``
    and ``/shared/out`` share only ``/``, and moving ``lib`` must not break the link, so the target stays
    absolute. A redirected output root is assumed to be of the second kind.

    Parameters
    ----------
    source : PurePath
        The path the link should resolve to.
    destination : PurePath
        Where the link will be created.
    target_dir_redirected : bool
        Whether the output root was redirected away from the source tree (default: ``False``).

    Returns
    -------
    PurePath
        A path relative to the directory containing ``destination``, or ``source`` unchanged when a relative
        target is not safe to compute.

    """
    if (
        target_dir_redirected
        or not source.is_absolute()
        or not destination.is_absolute()
        or contains_parent_components(source)
        or contains_parent_components(destination)
    ):
        return source

    root = shared_root(source, destination)
    if not root.parts:
        return source

    levels_up = len(destination.parent.parts) - len(root.parts)
    if levels_up < 0:
        # The destination's directory lies above the shared root, e.g. destination == source
        return source

    return type(source)(*[os.pardir] * levels_up, source.relative_to(root))


def contains_parent_components(path: PurePath) -> bool:
    """Return ``True`` if any component of ``path`` is ``..``."""
    return os.pardir in path.parts


def shared_root(left: PathT, right: PurePath) -> PathT:
    """Return the longest common leading sequence of components of ``left`` and ``right``.

    Parameters
    ----------
    left : PurePath
        The first path.
    right : PurePath
        The second path.

    Returns
    -------
    PurePath
        The shared root, of the same type as ``left``. It has no parts if the paths have nothing in common, for
        instance when they are on different Windows drives.

    """
    common = []
    for left_part, right_part in zip(left.parts, right.parts):
        if left_part != right_part:
            break
        common.append(left_part)
    return type(left)(*common)
