"""Logging configuration shared by the library and the server."""

from __future__ import annotations

import logging
import sys

from ideagraph.config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the root logger once.

    Args:
        level: Log level name or number. Defaults to ``LOG_LEVEL``.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)

    # Route uvicorn's loggers through the root handler.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
