"""Utility functions: whole-file text I/O and running a command with extra env vars."""

from __future__ import annotations

import os
import signal
import subprocess

from dotenv_cli.errors import CommandNotRunnable, FileNotReadable, FileNotWritable
from dotenv_cli.log import get_logger

logger = get_logger("utils")


def read_text(path: str | os.PathLike, *, missing_ok: bool = False) -> str:
    """Return the full contents of *path* as UTF-8 text.

    Line endings are left alone so that a rewrite keeps ``\\r\\n`` files
    byte-for-byte.  With *missing_ok*, a file that does not exist reads as
    the empty string.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        if missing_ok:
            logger.debug("%s does not exist, starting from an empty file", path)
            return ""
        raise FileNotReadable(str(path), e.strerror or str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileNotReadable(str(path), _reason(e)) from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def write_text(path: str | os.PathLike, text: str) -> None:
    """Replace the contents of *path* with *text* (UTF-8, no newline translation)."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise FileNotWritable(str(path), _reason(e)) from e
    logger.debug("Wrote %d characters to %s", len(text), path)


def run_command(parts: list[str], variables: dict[str, str]) -> int:
    """Run *parts* with the current environment overlaid by *variables*.

    Returns the child's exit code.  A child killed by a signal is reported
    the way a shell would: ``128 + signum``.
    """
    env = dict(os.environ)
    env.update(variables)
    logger.debug("Running %s with %d variable(s) from the env file", parts, len(variables))
    try:
        result = subprocess.run(parts, env=env)
    except OSError as e:
        raise CommandNotRunnable(parts[0], _reason(e)) from e
    if result.returncode < 0:
        sig = -result.returncode
        logger.debug("%s terminated by %s", parts[0], _signal_name(sig))
        return 128 + sig
    return result.returncode


def _reason(e: Exception) -> str:
    if isinstance(e, OSError) and e.strerror:
        return e.strerror
    return str(e)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"
