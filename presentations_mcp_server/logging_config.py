"""Logging setup for the server process.

stdout carries MCP messages when running over stdio, so all log output goes
to stderr. Call configure_logging() once at startup; later calls replace the
handler instead of adding another one.
"""

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_PACKAGE_LOGGER = "presentations_mcp_server"


def configure_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Output stream, stderr by default.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_presentations_mcp", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._presentations_mcp = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger
