"""Long option matching (``--name``, ``--name=value``, ``--name value``).

Long names are matched exactly against the text before the first ``=``;
there is no prefix abbreviation. Short-style clusters met while scanning
with a long table are handed to the short scanner with a specification
synthesized from the table's short equivalents, so one table serves both
syntaxes.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from reopt.errors import MSG_INVALID, MSG_MISSING, MSG_TOOMANY
from reopt.permute import is_longopt, is_shortopt, scan
from reopt.short import fail, parse_short_token
from reopt.state import ParserState
from reopt.types import DONE, ERROR, ArgType, LongOption, OptionCode

__all__ = ["iter_table", "next_long", "synthesize_short_spec"]


def iter_table(table: Sequence[LongOption]) -> Iterator[tuple[int, LongOption]]:
    """Yield ``(index, entry)`` pairs up to the terminating record."""
    for index, entry in enumerate(table):
        if entry.is_end:
            return
        yield index, entry


def synthesize_short_spec(table: Sequence[LongOption]) -> str:
    """Build the short specification string equivalent to ``table``.

    Entries without a short character in the fallback range are left out;
    they are only reachable through long syntax.

    Example:
        >>> synthesize_short_spec([LongOption("delay", "d", ArgType.REQUIRED),
        ...                        LongOption("verbose", 256)])
        'd:'
    """
    parts = []
    for _, entry in iter_table(table):
        char = entry.fallback_char
        if char is not None:
            parts.append(char + ":" * int(entry.argtype))
    return "".join(parts)


def _parse_fallback(state: ParserState, token: str, table: Sequence[LongOption]) -> OptionCode:
    result = parse_short_token(state, token, synthesize_short_spec(table))
    if result != ERROR:
        for index, entry in iter_table(table):
            if entry.short == result:
                state.long_index = index
                break
    return result


def _parse_long_token(state: ParserState, token: str, table: Sequence[LongOption]) -> OptionCode:
    body = token[2:]
    state.cursor += 1
    name, sep, inline = body.partition("=")

    for index, entry in iter_table(table):
        if not entry.name or entry.name != name:
            continue

        state.long_index = index
        state.last_option = entry.short
        argument = inline if sep else None

        if entry.argtype is ArgType.NONE and argument is not None:
            return fail(state, MSG_TOOMANY, entry.name)

        if argument is not None:
            state.last_argument = argument
        elif entry.argtype is ArgType.REQUIRED:
            following = state.current()
            if following is None:
                return fail(state, MSG_MISSING, entry.name)
            state.last_argument = following
            state.cursor += 1

        return entry.short  # type: ignore[return-value]

    return fail(state, MSG_INVALID, body)


def next_long(state: ParserState, table: Sequence[LongOption]) -> OptionCode:
    """Parse the next short or long option.

    Args:
        state: The parser state.
        table: Long option descriptors, optionally ending with ``END``.

    Returns:
        The matched entry's code (or the short character for ``-x`` syntax),
        ``DONE`` when no options remain, or ``ERROR`` with
        ``state.error_message`` set. ``state.long_index`` holds the matched
        entry's index, or -1.
    """
    state.clear_result()

    def parse(token: str) -> OptionCode:
        if is_shortopt(token):
            return _parse_fallback(state, token, table)
        return _parse_long_token(state, token, table)

    result = scan(state, lambda token: is_shortopt(token) or is_longopt(token), parse)
    if result == DONE:
        state.long_index = -1
    return result
