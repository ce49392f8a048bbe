"""Test helper functions for reopt tests.

Usage
=====

Import and use helpers directly in tests::

    from tests.helpers import LONGOPTS, make_state, unconsumed

    def test_example():
        state = make_state("-a", "foo")
        assert next_long(state, LONGOPTS) == "a"
        assert unconsumed(state) == ["foo"]
"""

from __future__ import annotations

from reopt import END, ArgType, LongOption, ParserState, drain_positionals

# Standard long option table used by most tests.
LONGOPTS: tuple[LongOption, ...] = (
    LongOption("amend", "a", ArgType.NONE),
    LongOption("brief", "b", ArgType.NONE),
    LongOption("color", "c", ArgType.OPTIONAL),
    LongOption("delay", "d", ArgType.REQUIRED),
    LongOption("erase", "e", ArgType.NONE),
    LongOption("file", "f", ArgType.REQUIRED),
    END,
)

# Environment variables read by reopt.config.load_config.
ENV_VARS = (
    "REOPT_LOG_LEVEL",
    "REOPT_LOG_JSON",
    "REOPT_DIAGNOSTIC_TAGS",
    "REOPT_OUTPUT_FORMAT",
    "POSIXLY_CORRECT",
)


def make_argv(*args: str) -> list[str]:
    """Return ``["prog", *args]``, shaped like ``sys.argv``."""
    return ["prog", *args]


def make_state(*args: str) -> ParserState:
    """Return a state initialized over ``make_argv(*args)``."""
    return ParserState.from_tokens(make_argv(*args))


def unconsumed(state: ParserState) -> list[str]:
    """Drain and return the remaining positionals."""
    return drain_positionals(state)
