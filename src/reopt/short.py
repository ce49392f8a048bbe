"""Short option scanning (``-a``, ``-abc``, ``-cvalue``, ``-c value``).

The specification string follows ``getopt()`` conventions: each character
is a recognized flag, one trailing colon means the flag requires a value and
two trailing colons mean the value is optional.

An optional value is only ever taken from the rest of the same token. A
following token is never consumed for it and stays available as a
positional; use ``-cvalue`` or the long ``--name=value`` form instead.
"""

from __future__ import annotations

from reopt.errors import MSG_INVALID, MSG_MISSING, format_error
from reopt.logging import get_logger
from reopt.permute import is_shortopt, scan
from reopt.state import ParserState
from reopt.types import ERROR, ArgType, OptionCode

__all__ = ["argtype_of", "next_short", "parse_short_token"]

logger = get_logger(__name__)


def argtype_of(spec: str, char: str) -> ArgType | None:
    """Look up the argument kind of ``char`` in a short spec.

    Args:
        spec: The short specification string.
        char: The flag character.

    Returns:
        The argument kind, or None when ``char`` is not a valid flag.
    """
    if char == ":":
        return None
    position = spec.find(char)
    if position < 0:
        return None
    colons = spec[position + 1 : position + 3]
    if colons == "::":
        return ArgType.OPTIONAL
    if colons.startswith(":"):
        return ArgType.REQUIRED
    return ArgType.NONE


def fail(state: ParserState, reason: str, name: str) -> OptionCode:
    """Record an in-band error on ``state`` and return ``ERROR``."""
    state.error_message = format_error(reason, name)
    logger.debug(
        "Parse error: %s",
        state.error_message,
        extra={"diagnostic_tag": "errors", "cursor": state.cursor, "option": name},
    )
    return ERROR


def parse_short_token(state: ParserState, token: str, spec: str) -> OptionCode:
    """Consume one flag from the short-option cluster ``token``.

    ``token`` must be the token under the cursor and satisfy
    :func:`reopt.permute.is_shortopt`.
    """
    position = state.cluster_offset + 1
    char = token[position]
    rest = token[position + 1 :]
    state.last_option = char
    kind = argtype_of(spec, char)

    if kind is None:
        state.cursor += 1
        state.cluster_offset = 0
        return fail(state, MSG_INVALID, char)

    if kind is ArgType.NONE:
        if rest:
            state.cluster_offset += 1
        else:
            state.cluster_offset = 0
            state.cursor += 1
        return char

    state.cluster_offset = 0
    state.cursor += 1
    if rest:
        state.last_argument = rest
    elif kind is ArgType.REQUIRED:
        following = state.current()
        if following is None:
            return fail(state, MSG_MISSING, char)
        state.last_argument = following
        state.cursor += 1
    return char


def next_short(state: ParserState, spec: str) -> OptionCode:
    """Parse the next short option.

    Args:
        state: The parser state.
        spec: The short specification string, e.g. ``"ab:c::"``.

    Returns:
        The option character, ``DONE`` when no options remain, or ``ERROR``
        with ``state.error_message`` set.
    """
    state.clear_result()
    return scan(state, is_shortopt, lambda token: parse_short_token(state, token, spec))
