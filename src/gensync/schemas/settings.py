"""Schema for the settings that influence how links are created."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from gensync.config import TARGET_DIR_ENV_VAR


class SyncSettings(BaseModel):
    """Settings shared by the link operations.

    Attributes
    ----------
    target_dir_redirected : bool
        Whether the output root was redirected to a location that may not share a meaningful parent directory
        with the source tree. When set, link targets are always kept absolute (default: ``False``).

    """

    target_dir_redirected: bool = Field(default=False)

    @classmethod
    def from_env(cls) -> SyncSettings:
        """Build the settings from the current process environment.

        Returns
        -------
        SyncSettings
            Settings with ``target_dir_redirected`` enabled whenever ``GENSYNC_TARGET_DIR`` is set.

        """
        return cls(target_dir_redirected=os.getenv(TARGET_DIR_ENV_VAR) is not None)
