"""Convenience wrappers around the scanning primitives."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from reopt.errors import DescriptorError
from reopt.long import next_long
from reopt.permute import next_positional
from reopt.short import next_short
from reopt.state import ParserState
from reopt.types import DONE, ArgType, LongOption, ParsedOption

__all__ = [
    "LONG_ONLY_BASE",
    "drain_positionals",
    "iter_options",
    "parse_long_spec",
]

# First code handed out by parse_long_spec; above any fallback character.
LONG_ONLY_BASE = 256


def drain_positionals(state: ParserState) -> list[str]:
    """Collect every remaining token via :func:`next_positional`."""
    remaining = []
    token = next_positional(state)
    while token is not None:
        remaining.append(token)
        token = next_positional(state)
    return remaining


def iter_options(
    state: ParserState, options: str | Sequence[LongOption]
) -> Iterator[ParsedOption]:
    """Yield parsed options until the scanner reports ``DONE``.

    Errors are yielded like any other result (see ``ParsedOption.failed``);
    the caller decides whether to stop.

    Args:
        state: The parser state.
        options: A short specification string, or a long option table.

    Yields:
        One ``ParsedOption`` per scanner call.
    """
    while True:
        if isinstance(options, str):
            code = next_short(state, options)
        else:
            code = next_long(state, options)
        if code == DONE:
            return
        yield ParsedOption(
            code=code,
            argument=state.last_argument,
            long_index=state.long_index,
            error=state.error_message,
        )


def parse_long_spec(text: str, start: int = LONG_ONLY_BASE) -> list[LongOption]:
    """Build a long-only table from ``getopt(1)`` style text.

    Names are comma separated; a trailing ``:`` marks a required value and
    ``::`` an optional one.

    Args:
        text: E.g. ``"amend,delay:,color::"``.
        start: Code assigned to the first entry; later entries count up.

    Returns:
        The table, without a terminating record.

    Raises:
        DescriptorError: If a name is empty.

    Example:
        >>> [(o.name, o.short, o.argtype.name) for o in parse_long_spec("delay:,color::")]
        [('delay', 256, 'REQUIRED'), ('color', 257, 'OPTIONAL')]
    """
    table: list[LongOption] = []
    for raw in text.split(","):
        item = raw.strip()
        if not item:
            continue
        if item.endswith("::"):
            name, argtype = item[:-2], ArgType.OPTIONAL
        elif item.endswith(":"):
            name, argtype = item[:-1], ArgType.REQUIRED
        else:
            name, argtype = item, ArgType.NONE
        if not name:
            raise DescriptorError(f"Empty long option name in {text!r}")
        table.append(LongOption(name, start + len(table), argtype))
    return table
