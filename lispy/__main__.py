#!/usr/bin/env python3
"""
Command line entry point for Lispy.

Usage:
    python -m lispy                      # interactive prompt
    python -m lispy -e "(+ 1 2)"         # evaluate and print expressions
    python -m lispy FILE                 # evaluate each line of FILE

Examples:
    python -m lispy -e "(* 2 (+ 1 2))" -e "(/ 10 0)"
    LISPY_LOG_LEVEL=DEBUG python -m lispy --no-history
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

from lispy import __version__
from lispy import config
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.log_support import setup_loggers
from lispy.printer import println

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lispy",
        description="Evaluate Lispy arithmetic s-expressions.",
    )
    parser.add_argument("file", nargs="?", type=Path,
                        help="evaluate each non-blank line of FILE")
    parser.add_argument("-e", "--eval", dest="exprs", action="append", default=[],
                        metavar="EXPR", help="evaluate EXPR and print the result (repeatable)")
    parser.add_argument("--no-history", action="store_true",
                        help="do not load or save the line history file")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: $LISPY_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_lines(interp: Interpreter, lines: Iterable[str], out: TextIO, err: TextIO) -> int:
    """Evaluate each non-blank line. Returns 1 if any line failed to parse."""
    status = 0
    for line in lines:
        if not line.strip():
            continue
        try:
            println(interp.eval(line), out)
        except LispySyntaxError as e:
            err.write(f"{e}\n")
            status = 1
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    level = config.get_log_level()
    if args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    setup_loggers(level)

    if args.exprs:
        return run_lines(Interpreter(filename="<eval>"), args.exprs, sys.stdout, sys.stderr)

    if args.file is not None:
        with open(args.file) as fd:
            return run_lines(Interpreter(filename=str(args.file)), fd, sys.stdout, sys.stderr)

    # Only the interactive loop needs readline
    from lispy.repl import Repl
    history_file = None if args.no_history else config.get_history_file()
    return Repl(history_file=history_file).run()


if __name__ == "__main__":
    sys.exit(main())
