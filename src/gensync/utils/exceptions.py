"""Custom exceptions for the gensync package."""

from __future__ import annotations

import errno


class FilesystemError(Exception):
    """Exception raised when a filesystem operation fails.

    The underlying ``OSError`` reported by the platform is kept in ``error`` so callers can
    inspect its ``errno``; the message adds which operation failed and on which path.
    """

    def __init__(self, message: str, error: OSError) -> None:
        super().__init__(f"{message}: {error}")
        self.error = error

    @property
    def already_exists(self) -> bool:
        """Return ``True`` if the operation failed because the path already exists."""
        return self.error.errno == errno.EEXIST
