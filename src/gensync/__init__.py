"""gensync: idempotent writing of generated files and links into a build output directory."""

from loguru import logger

from gensync.output import symlink_dir, symlink_file, write_if_changed
from gensync.utils.exceptions import FilesystemError

# Records stay out of the host's sinks until it calls ``logger.enable("gensync")``
logger.disable("gensync")

__all__ = ["FilesystemError", "symlink_dir", "symlink_file", "write_if_changed"]
