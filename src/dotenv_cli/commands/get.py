"""dotenv_cli get: print the value of one variable."""

from __future__ import annotations

import argparse

from dotenv_cli.commands import add_file_arg, env_file_for
from dotenv_cli.errors import VariableNotFound
from dotenv_cli.parser import parse
from dotenv_cli.utils import read_text


def add_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "get",
        help="Get an environment variable",
        description="Print the resolved value of a variable from the .env file.",
    )
    p.add_argument("name", help="Environment variable name")
    add_file_arg(p)
    p.set_defaults(func=run_get)


def run_get(args: argparse.Namespace) -> int:
    path = env_file_for(args)
    variables = parse(read_text(path))
    if args.name not in variables:
        raise VariableNotFound(args.name, path)
    print(variables[args.name])
    return 0
