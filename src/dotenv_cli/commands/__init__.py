"""Subcommand modules; each exposes ``add_parser`` and a ``run_*`` handler."""

from __future__ import annotations

import argparse

from dotenv_cli.config import resolve_env_file
from dotenv_cli.log import get_logger

logger = get_logger("commands")


def add_file_arg(parser: argparse.ArgumentParser, *, default=argparse.SUPPRESS) -> None:
    """Register ``-f/--file``.

    Subparsers use a suppressed default so a value given before the
    subcommand is not clobbered.
    """
    parser.add_argument(
        "-f", "--file", default=default, metavar="FILE",
        help="Path of the .env file (default: ./.env)",
    )


def env_file_for(args: argparse.Namespace) -> str:
    """Return the dotenv path for this invocation."""
    path = resolve_env_file(getattr(args, "file", None))
    logger.debug("Using env file %s", path)
    return path
