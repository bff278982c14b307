"""Tests for the filesystem wrappers in ``gensync.utils.fs``."""

from __future__ import annotations

import errno
import sys
from pathlib import Path

import pytest

from gensync.utils import fs
from gensync.utils.exceptions import FilesystemError

if sys.platform == "win32":
    pytest.skip("symlinks need extra privileges on Windows", allow_module_level=True)


def test_read_missing_file_raises_filesystem_error(tmp_path: Path) -> None:
    """Failures carry the path in the message and the original ``OSError``."""
    path = tmp_path / "missing.txt"

    with pytest.raises(FilesystemError, match="Failed to read file") as exc_info:
        fs.read(path)

    assert isinstance(exc_info.value.error, FileNotFoundError)
    assert str(path) in str(exc_info.value)
    assert exc_info.value.__cause__ is exc_info.value.error


def test_create_dir_all_is_idempotent(tmp_path: Path) -> None:
    """Creating an existing directory chain again succeeds."""
    path = tmp_path / "a" / "b"

    fs.create_dir_all(path)
    fs.create_dir_all(path)

    assert path.is_dir()


def test_exists_reports_dangling_symlink(tmp_path: Path) -> None:
    """A dangling symlink occupies its path."""
    link = tmp_path / "link"
    link.symlink_to(tmp_path / "missing")

    assert fs.exists(link)
    assert not fs.exists(tmp_path / "missing")


def test_symlink_or_copy_reports_existing_link(tmp_path: Path) -> None:
    """An existing destination is reported as "already exists"."""
    link = tmp_path / "link"
    link.write_text("data")

    with pytest.raises(FilesystemError) as exc_info:
        fs.symlink_or_copy(Path("target"), link)

    assert exc_info.value.already_exists


def test_symlink_or_copy_falls_back_to_copy(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Where symlinks are unavailable the file is copied, resolving a relative target from the link's directory."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "api.h").write_text("int api(void);\n")
    (tmp_path / "out").mkdir()
    link = tmp_path / "out" / "api.h"

    def _no_symlinks(*_: object, **__: object) -> None:
        raise OSError(errno.EPERM, "A required privilege is not held by the client")

    monkeypatch.setattr(fs, "_SYMLINKS_MAY_BE_UNAVAILABLE", True)
    monkeypatch.setattr(Path, "symlink_to", _no_symlinks)

    fs.symlink_or_copy(Path("..", "src", "api.h"), link)

    assert not link.is_symlink()
    assert link.read_text() == "int api(void);\n"


def test_symlink_dir_or_copy_falls_back_to_copytree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Directories are copied recursively when a directory symlink cannot be created."""
    (tmp_path / "src" / "detail").mkdir(parents=True)
    (tmp_path / "src" / "detail" / "impl.h").write_text("int impl(void);\n")
    link = tmp_path / "include"

    def _no_symlinks(*_: object, **__: object) -> None:
        raise OSError(errno.EPERM, "A required privilege is not held by the client")

    monkeypatch.setattr(fs, "_SYMLINKS_MAY_BE_UNAVAILABLE", True)
    monkeypatch.setattr(Path, "symlink_to", _no_symlinks)

    fs.symlink_dir_or_copy(tmp_path / "src", link)

    assert (link / "detail" / "impl.h").read_text() == "int impl(void);\n"


def test_symlink_error_raised_when_symlinks_are_supported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without the copy fallback a symlink failure is raised."""

    def _no_symlinks(*_: object, **__: object) -> None:
        raise OSError(errno.EPERM, "Operation not permitted")

    monkeypatch.setattr(fs, "_SYMLINKS_MAY_BE_UNAVAILABLE", False)
    monkeypatch.setattr(Path, "symlink_to", _no_symlinks)

    with pytest.raises(FilesystemError, match="Failed to create symlink") as exc_info:
        fs.symlink_or_copy(tmp_path / "target", tmp_path / "link")

    assert not exc_info.value.already_exists
