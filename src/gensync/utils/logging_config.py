"""Logging configuration for gensync using loguru.

Routes records emitted through the standard ``logging`` module into loguru so the package and anything it
imports share a single stderr sink whose level is taken from the ``GENSYNC_LOG_LEVEL`` environment variable.
Nothing is configured on import; the CLI calls ``configure_logging`` when it starts.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

from gensync.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from loguru import Logger, Record

_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>{extra[context]}"
)


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a record by re-logging it through loguru at the matching level.

        Parameters
        ----------
        record : logging.LogRecord
            The record produced by a standard library logger.

        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that originated the record so loguru reports the right location
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(name=record.name).opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _patch_record(record: Record) -> None:
    """Fill in the extra fields referenced by the log format."""
    extra = record["extra"]
    extra.setdefault("name", record["name"])
    fields = extra.get("extra")
    extra["context"] = f" {fields}" if fields else ""


def configure_logging() -> None:
    """Configure loguru with a single stderr sink and intercept standard library logging.

    This replaces every existing sink and root handler, so only the command-line entry point calls it. Code that
    imports the package keeps its own logging setup and sees no gensync records until it enables them with
    ``logger.enable("gensync")``.
    """
    level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()

    logger.enable("gensync")
    logger.remove()
    logger.configure(patcher=_patch_record)
    logger.add(sys.stderr, format=_FORMAT, level=level, colorize=None)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(name: str) -> Logger:
    """Return a loguru logger bound to ``name``.

    Parameters
    ----------
    name : str
        Name of the module requesting the logger, usually ``__name__``.

    Returns
    -------
    Logger
        The shared loguru logger with ``name`` attached to every record.

    """
    return logger.bind(name=name)

