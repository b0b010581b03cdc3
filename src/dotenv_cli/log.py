"""Logging setup: one stderr handler on the package logger."""

from __future__ import annotations

import logging
import sys

_ROOT = "dotenv_cli"
_FORMAT = "%(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``dotenv_cli`` logger.

    Debug output is only shown with ``-v/--verbose``; otherwise warnings
    and above reach stderr.  Calling it again replaces the handler, so it
    always writes to the current ``sys.stderr``.
    """
    logger = logging.getLogger(_ROOT)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``dotenv_cli.editor``."""
    return logging.getLogger(f"{_ROOT}.{name}")
