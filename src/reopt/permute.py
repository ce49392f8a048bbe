"""Non-option permutation and positional extraction.

With permutation enabled, a scanner that meets a non-option skips it, parses
the next option further along, and then rotates every skipped token back to
sit just before the new cursor. Repeated over a whole parse this moves all
options ahead of all positionals while keeping the order inside each group.

The rotation is done iteratively: skipped indices are collected in a forward
pass and rotated in reverse order once the option has been parsed, which is
the same order a self-recursive scanner would unwind in.
"""

from __future__ import annotations

from collections.abc import Callable

from reopt.logging import get_logger
from reopt.state import ParserState
from reopt.types import DONE, OptionCode

__all__ = [
    "is_dashdash",
    "is_longopt",
    "is_shortopt",
    "next_positional",
    "scan",
]

logger = get_logger(__name__)


def is_dashdash(token: str) -> bool:
    """Return True for the ``--`` terminator."""
    return token == "--"


def is_shortopt(token: str) -> bool:
    """Return True for ``-x...`` where ``x`` is not a dash."""
    return len(token) > 1 and token[0] == "-" and token[1] != "-"


def is_longopt(token: str) -> bool:
    """Return True for ``--name...`` with a non-empty remainder."""
    return len(token) > 2 and token.startswith("--")


def _rotate(state: ParserState, index: int) -> None:
    tokens = state.tokens
    nonoption = tokens[index]
    end = state.cursor - 1
    for i in range(index, end):
        tokens[i] = tokens[i + 1]
    tokens[end] = nonoption
    if end != index:
        logger.debug(
            "Moved %r from %d to %d",
            nonoption,
            index,
            end,
            extra={"diagnostic_tag": "permute", "token": nonoption, "cursor": state.cursor},
        )


def scan(
    state: ParserState,
    is_option: Callable[[str], bool],
    parse_option: Callable[[str], OptionCode],
) -> OptionCode:
    """Run one scanning step, handling terminators and non-options.

    Args:
        state: The parser state.
        is_option: Classifier for tokens the caller knows how to parse.
        parse_option: Parses the option token under the cursor.

    Returns:
        The result of ``parse_option``, or ``DONE``.
    """
    skipped: list[int] = []
    while True:
        token = state.current()
        if token is None:
            result: OptionCode = DONE
            break
        if is_dashdash(token):
            state.cursor += 1
            result = DONE
            break
        if is_option(token):
            result = parse_option(token)
            break
        if not state.permute:
            result = DONE
            break
        skipped.append(state.cursor)
        state.cursor += 1

    for index in reversed(skipped):
        _rotate(state, index)
        state.cursor -= 1
    return result


def next_positional(state: ParserState) -> str | None:
    """Return the next unclaimed token and step past it.

    Args:
        state: The parser state.

    Returns:
        The token under the cursor, or None when the tokens are exhausted.
    """
    token = state.current()
    state.cluster_offset = 0
    if token is not None:
        state.cursor += 1
    return token
