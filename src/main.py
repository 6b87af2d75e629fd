#!/usr/bin/env python3
""" Command-line entry point for minish. """
import argparse
import logging
import os
import sys

from completion import Completer, install
from constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, PROMPT
from shell import Shell


def configure_logging(level_name: str):
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {level_name}")
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="minish",
        description="A small interactive shell with quoting, $VAR expansion and output redirection",
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="run a single command line and exit with its status",
    )
    parser.add_argument(
        "--prompt",
        default=PROMPT,
        help=f"primary prompt (default: {PROMPT!r})",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"logging level written to stderr (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--no-completion",
        action="store_true",
        help="disable tab completion of command names",
    )
    return parser


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    sh = Shell(prompt=args.prompt)
    if args.command is not None:
        return sh.run_line(args.command)

    if not args.no_completion:
        install(Completer(sh.state))
    return sh.run()


if __name__ == "__main__":
    sys.exit(main())
