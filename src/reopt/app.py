"""Application runner for the ``reopt`` command-line front end.

The front end mirrors ``getopt(1)``: it takes an option definition and a
token list, runs the parser over the tokens, and prints the options and
positionals in normalized, shell-quoted form (or as JSON) so shell scripts
can ``eval set -- "$(reopt ...)"``.

Exit codes:
    0: All tokens parsed.
    1: At least one parse error (each printed to stderr as ``NAME: message``).
    2: Invalid front-end usage or option definitions.
"""

from __future__ import annotations

import argparse
import json
import shlex
import sys
from dataclasses import dataclass, field, replace
from typing import Any

from reopt.cli import parse_args
from reopt.config import Config, load_config
from reopt.errors import DescriptorError
from reopt.helpers import drain_positionals, iter_options, parse_long_spec
from reopt.logging import get_logger, setup_logging
from reopt.short import argtype_of
from reopt.state import ParserState
from reopt.types import LongOption
from reopt.validation import validate_short_spec, validate_table

logger = get_logger(__name__)


@dataclass
class ParseOutcome:
    """Normalized result of parsing a token list.

    Attributes:
        options: ``(word, argument)`` pairs, e.g. ``("-c", "red")`` or
            ``("--delay", "10")``; ``argument`` is None when absent.
        positionals: Tokens left over after option parsing.
        errors: Error messages in the order they occurred.
    """

    options: list[tuple[str, str | None]] = field(default_factory=list)
    positionals: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """Return True if no parse errors occurred."""
        return not self.errors


def apply_cli_overrides(config: Config, parsed: argparse.Namespace) -> Config:
    """Apply CLI argument overrides to the configuration.

    Args:
        config: Base configuration loaded from environment.
        parsed: Parsed command-line arguments.

    Returns:
        New Config instance with CLI overrides applied.
    """
    overrides: dict[str, Any] = {}

    if parsed.log_level:
        overrides["log_level"] = parsed.log_level
    if parsed.format:
        overrides["output_format"] = parsed.format
    if parsed.posix:
        overrides["permute"] = False

    if overrides:
        return replace(config, **overrides)
    return config


def build_table(short_spec: str, long_spec: str) -> list[LongOption]:
    """Combine a short spec and a ``getopt(1)`` long list into one table.

    Long entries come first and get long-only codes; each short flag becomes
    a short-only entry so both syntaxes are handled by one long scan.

    Raises:
        DescriptorError: If either definition is malformed.
    """
    validate_short_spec(short_spec)
    table = parse_long_spec(long_spec)
    seen: set[str] = set()
    for char in short_spec:
        if char == ":" or char in seen:
            continue
        seen.add(char)
        table.append(LongOption(None, char, argtype_of(short_spec, char)))
    validate_table(table)
    return table


def run_parse(
    tokens: list[str],
    table: list[LongOption],
    *,
    permute: bool = True,
) -> ParseOutcome:
    """Parse ``tokens`` (token 0 is the program name) against ``table``.

    Args:
        tokens: The token list; it is permuted in place.
        table: The combined option table.
        permute: Whether to permute non-options behind options.

    Returns:
        The normalized outcome.
    """
    state = ParserState.from_tokens(tokens)
    state.permute = permute
    outcome = ParseOutcome()

    for parsed in iter_options(state, table):
        if parsed.failed:
            outcome.errors.append(parsed.error)
            continue
        if isinstance(parsed.code, str):
            word = f"-{parsed.code}"
        else:
            word = f"--{table[parsed.long_index].name}"
        outcome.options.append((word, parsed.argument))

    outcome.positionals = drain_positionals(state)
    logger.info(
        "Parsed %d option(s), %d positional(s), %d error(s)",
        len(outcome.options),
        len(outcome.positionals),
        len(outcome.errors),
    )
    return outcome


def render_shell(outcome: ParseOutcome) -> str:
    """Render an outcome as one line of shell-quoted words."""
    words: list[str] = []
    for word, argument in outcome.options:
        words.append(word)
        if argument is not None:
            words.append(shlex.quote(argument))
    words.append("--")
    words.extend(shlex.quote(token) for token in outcome.positionals)
    return " ".join(words)


def render_json(outcome: ParseOutcome) -> str:
    """Render an outcome as a JSON document."""
    return json.dumps(
        {
            "options": [
                {"option": word, "argument": argument} for word, argument in outcome.options
            ],
            "positionals": outcome.positionals,
            "errors": outcome.errors,
        }
    )


def main(args: list[str] | None = None) -> int:
    """Main entry point for the ``reopt`` command.

    This entry point:
    1. Parses the front end's own arguments
    2. Loads configuration and sets up logging
    3. Parses the tokens and prints the outcome

    Args:
        args: Optional list of command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code for the application.
    """
    parsed = parse_args(sys.argv[1:] if args is None else args)

    config = apply_cli_overrides(load_config(parsed.env_file), parsed)
    setup_logging(
        config.log_level,
        json_format=config.log_json,
        diagnostic_tags=config.diagnostic_tags,
    )

    try:
        table = build_table(parsed.options, parsed.longoptions)
    except DescriptorError as e:
        print(f"{parsed.name}: {e}", file=sys.stderr)
        return 2

    outcome = run_parse([parsed.name, *parsed.tokens], table, permute=config.permute)

    for message in outcome.errors:
        print(f"{parsed.name}: {message}", file=sys.stderr)

    if config.output_format == "json":
        print(render_json(outcome))
    else:
        print(render_shell(outcome))

    return 0 if outcome.succeeded else 1


__all__ = [
    "ParseOutcome",
    "apply_cli_overrides",
    "build_table",
    "main",
    "render_json",
    "render_shell",
    "run_parse",
]
