"""Fixtures for tests.

This file provides shared fixtures for a temporary source tree and output directory, and keeps the process
environment from leaking link settings into the tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gensync.config import TARGET_DIR_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clear_target_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a ``GENSYNC_TARGET_DIR`` set in the calling shell does not change link targets."""
    monkeypatch.delenv(TARGET_DIR_ENV_VAR, raising=False)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a small project tree next to an empty output directory.

    The structure includes:
    project/
    ├── src/
    │   ├── api.h
    │   └── detail/
    │       └── impl.h
    └── out/

    Parameters
    ----------
    tmp_path : Path
        The temporary directory path provided by the ``tmp_path`` fixture.

    Returns
    -------
    Path
        The path to the created ``project`` directory.

    """
    project = tmp_path / "project"
    detail = project / "src" / "detail"
    detail.mkdir(parents=True)
    (project / "src" / "api.h").write_text("int api(void);\n")
    (detail / "impl.h").write_text("int impl(void);\n")
    (project / "out").mkdir()
    return project
