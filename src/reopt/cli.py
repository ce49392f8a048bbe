"""Command-line interface argument parsing for the ``reopt`` front end.

The front end's own options come first; everything after the first ``--``
is the token list to be parsed, exactly as ``getopt(1)`` takes it:

    reopt -o ab:c:: -l amend,delay: -- -a --delay 10 foo

This module provides the parser for:
- Short and long option definitions
- Program name used in messages and as token 0
- Strict (POSIX) mode
- Output format, log level and environment file overrides
"""

from __future__ import annotations

import argparse
from pathlib import Path

from reopt.config import VALID_LOG_LEVELS, VALID_OUTPUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the front end's own options."""
    parser = argparse.ArgumentParser(
        prog="reopt",
        description="Parse command-line tokens and print them in normalized form",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Tokens to parse follow the first '--'.",
    )

    parser.add_argument(
        "-o",
        "--options",
        default="",
        metavar="SPEC",
        help="Short options, getopt() style (e.g. 'ab:c::')",
    )

    parser.add_argument(
        "-l",
        "--longoptions",
        default="",
        metavar="LONGOPTS",
        help="Comma-separated long options; ':' required value, '::' optional value",
    )

    parser.add_argument(
        "-n",
        "--name",
        default="reopt",
        help="Program name used in error messages (default: reopt)",
    )

    parser.add_argument(
        "--posix",
        action="store_true",
        help="Stop at the first non-option (also enabled by POSIXLY_CORRECT)",
    )

    parser.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=None,
        help="Output format (overrides REOPT_OUTPUT_FORMAT)",
    )

    parser.add_argument(
        "--log-level",
        choices=sorted(VALID_LOG_LEVELS),
        default=None,
        help="Log level (overrides REOPT_LOG_LEVEL)",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: ./.env)",
    )

    return parser


def parse_args(args: list[str]) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: The front end's arguments (without the program name).

    Returns:
        Parsed arguments namespace with the following attributes:
        - options: Short option spec
        - longoptions: Long option list
        - name: Program name
        - posix: Whether permutation is disabled
        - format: Output format override
        - log_level: Logging level override
        - env_file: Path to .env file
        - tokens: Everything after the first '--'
    """
    if "--" in args:
        split = args.index("--")
        own, tokens = args[:split], args[split + 1 :]
    else:
        own, tokens = args, []

    namespace = build_parser().parse_args(own)
    namespace.tokens = tokens
    return namespace


__all__ = ["build_parser", "parse_args"]
