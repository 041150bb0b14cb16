"""Logging setup for rfcs."""

from __future__ import annotations

import logging
import sys

from ..constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``rfcs`` logger hierarchy to write to stderr.

    stdout carries command output (or the MCP protocol), so log records
    always go to stderr.  Calling this again replaces the previous handler.
    Unknown level names fall back to the default.
    """
    name = (level or DEFAULT_LOG_LEVEL).upper()
    resolved = getattr(logging, name, None)
    if not isinstance(resolved, int):
        resolved = getattr(logging, DEFAULT_LOG_LEVEL)

    logger = logging.getLogger("rfcs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return logger
