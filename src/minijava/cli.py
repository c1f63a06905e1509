"""Command-line driver: ``minijava-check FILE... [--dump-tokens]``.

Reads each compilation unit, prints diagnostics to stderr and a
confirmation line per clean file to stdout.

Exit status:
    0  every file is syntactically valid
    1  at least one file has syntax errors
    2  a file could not be read
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from minijava import __version__
from minijava.config import ParseConfig, parse_config_context
from minijava.parser import Parser
from minijava.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1
EXIT_IO_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minijava-check",
        description="Check MiniJava source files for syntax errors",
    )
    parser.add_argument("files", nargs="+", help="Source files ('-' for stdin)")
    parser.add_argument(
        "--dump-tokens",
        action="store_true",
        help="Print every token as it is produced",
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=4,
        help="Columns a tab advances in diagnostics (default: 4)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def check_file(path: str) -> int:
    """Check one file under the active config and report the outcome.

    Returns:
        Exit status for this file.
    """
    try:
        if path == "-":
            result = Parser(sys.stdin.buffer.read(), "<stdin>").parse()
        else:
            with open(path, "rb") as stream:
                result = Parser(stream, path).parse()
    except OSError as exc:
        print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    for message in result.messages():
        print(message, file=sys.stderr)
    if result.ok:
        print("No error!")
        return EXIT_OK
    return EXIT_SYNTAX_ERROR


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = ParseConfig(trace_tokens=args.dump_tokens, tab_width=args.tab_width)
    except ValueError as exc:
        print(f"minijava-check: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    status = EXIT_OK
    with parse_config_context(config):
        for path in args.files:
            logger.debug("checking %s", path)
            status = max(status, check_file(path))
    return status


if __name__ == "__main__":
    sys.exit(main())
