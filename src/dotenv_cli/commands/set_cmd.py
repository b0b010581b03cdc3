"""dotenv_cli set: insert or update one variable, leaving the rest of the file alone."""

from __future__ import annotations

import argparse

from dotenv_cli.commands import add_file_arg, env_file_for
from dotenv_cli.editor import update
from dotenv_cli.utils import read_text, write_text


def add_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "set",
        help="Set an environment variable",
        description=(
            "Set a variable in the .env file.  An existing assignment is "
            "rewritten in place; otherwise a new line is appended.  The file "
            "is created if it does not exist."
        ),
    )
    p.add_argument("name", help="Environment variable name")
    p.add_argument("value", help="Environment variable value")
    add_file_arg(p)
    p.set_defaults(func=run_set)


def run_set(args: argparse.Namespace) -> int:
    path = env_file_for(args)
    # Name is validated by update() before anything is written.
    text = update(read_text(path, missing_ok=True), args.name, args.value)
    write_text(path, text)
    return 0
