"""Full argparse tree with subparsers, dispatcher, and main() entry point."""

from __future__ import annotations

import argparse
import sys

from dotenv_cli import __version__
from dotenv_cli.commands import add_file_arg
from dotenv_cli.errors import DotenvError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotenv_cli",
        description="CLI tool for interacting with .env files",
        epilog=(
            "global switches:\n"
            "  -f, --file FILE   path of the .env file (default: ./.env,\n"
            "                    or $DOTENV_CLI_FILE, or [defaults] file in\n"
            "                    $XDG_CONFIG_HOME/dotenv_cli/config.toml)\n"
            "  -v, --verbose     show debug output (before COMMAND)\n"
            "  --version         print the version and exit\n"
            "\n"
            "run 'dotenv_cli COMMAND --help' for subcommand-specific options"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    add_file_arg(parser, default=None)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # Import and register all subcommand parsers.
    from dotenv_cli.commands.get import add_parser as add_get_parser
    from dotenv_cli.commands.set_cmd import add_parser as add_set_parser
    from dotenv_cli.commands.run import add_parser as add_run_parser

    add_get_parser(subparsers)
    add_set_parser(subparsers)
    add_run_parser(subparsers)

    return parser


_SUBCOMMANDS = {"get", "set", "run"}


def _extract_verbose(argv: list[str]) -> tuple[bool, list[str]]:
    """Pull -v/--verbose out of the switches that precede the subcommand.

    Anything from the subcommand on is left alone so that ``run`` can pass
    ``-v`` through to the child command.
    """
    verbose = False
    out: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in _SUBCOMMANDS:
            return verbose, out + argv[i:]
        if arg in ("-v", "--verbose"):
            verbose = True
        elif arg in ("-f", "--file"):
            # The file name may itself look like a subcommand.
            out.extend(argv[i:i + 2])
            i += 1
        else:
            out.append(arg)
        i += 1
    return verbose, out


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()

    import argcomplete
    argcomplete.autocomplete(parser)

    effective = list(argv if argv is not None else sys.argv[1:])
    verbose, effective = _extract_verbose(effective)

    from dotenv_cli.log import setup_logging
    setup_logging(verbose=verbose)

    # Handle top-level --help and --version before argparse dispatch
    # (kept off the parser so they don't appear in tab-completion).
    if effective and effective[0] in ("-h", "--help"):
        parser.print_help()
        sys.exit(0)
    elif effective and effective[0] == "--version":
        print(f"dotenv_cli {__version__}")
        sys.exit(0)

    args = parser.parse_args(effective)

    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        sys.exit(0)

    try:
        rc = func(args)
    except DotenvError as e:
        print(f"Error: {e}", file=sys.stderr)
        rc = 1
    except KeyboardInterrupt:
        print()
        rc = 130

    sys.exit(rc)
