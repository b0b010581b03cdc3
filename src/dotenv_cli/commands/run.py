"""dotenv_cli run: run a command with the .env variables in its environment."""

from __future__ import annotations

import argparse
import sys

from dotenv_cli.commands import add_file_arg, env_file_for
from dotenv_cli.parser import parse
from dotenv_cli.utils import read_text, run_command


def add_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "run",
        help="Run a command with environment variables",
        description=(
            "Run COMMAND with the variables from the .env file added to its "
            "environment.  Exits with the command's exit code."
        ),
    )
    add_file_arg(p)
    p.add_argument(
        "command_args", nargs=argparse.REMAINDER, metavar="COMMAND",
        help="Command to run and its arguments (passed through untouched)",
    )
    p.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    parts = list(args.command_args)
    # Strip leading '--' from REMAINDER
    if parts and parts[0] == "--":
        parts = parts[1:]
    if not parts:
        print("Error: run requires a command", file=sys.stderr)
        return 2

    path = env_file_for(args)
    variables = parse(read_text(path))
    return run_command(parts, variables)
