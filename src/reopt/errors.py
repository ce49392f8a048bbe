"""Error reporting for the option parser.

Parse errors are reported in-band: the scanners return ``ERROR`` and leave a
bounded message on the parser state. This module owns the message format and
the exceptions raised for malformed descriptors, plus :func:`raise_for_error`
for callers that would rather handle parse errors as exceptions.

Message format::

    <reason> -- '<offending-name>'

The message never exceeds ``ERROR_CAPACITY - 1`` characters. When the
offending name is too long it is cut short, and the closing quote is dropped
if there is no room left for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reopt.state import ParserState

__all__ = [
    "DescriptorError",
    "ERROR_CAPACITY",
    "MSG_INVALID",
    "MSG_MISSING",
    "MSG_TOOMANY",
    "OptionError",
    "format_error",
    "raise_for_error",
]

MSG_INVALID = "invalid option"
MSG_MISSING = "option requires an argument"
MSG_TOOMANY = "option takes no arguments"

# Size of the message buffer, including the terminator slot.
ERROR_CAPACITY = 64

_SEPARATOR = " -- '"


class DescriptorError(ValueError):
    """Raised when an option descriptor or table is malformed.

    This is a programming error in the caller's option definitions, not a
    problem with the parsed tokens, so it is raised eagerly.

    Example:
        >>> LongOption("color=", "c")
        Traceback (most recent call last):
        ...
        reopt.errors.DescriptorError: Long option name cannot contain '=': 'color='
    """

    pass


class OptionError(Exception):
    """Raised by :func:`raise_for_error` for an in-band parse error.

    Attributes:
        message: The bounded error message from the parser state.
        reason: One of ``MSG_INVALID``, ``MSG_MISSING`` or ``MSG_TOOMANY``.
        option: The option character or code that was being parsed, if known.
    """

    def __init__(self, message: str, reason: str, option: str | int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.option = option


def format_error(reason: str, name: str, capacity: int = ERROR_CAPACITY) -> str:
    """Build a bounded error message.

    Fills the message the way a fixed buffer of ``capacity`` slots would be
    filled: the reason and separator may use up to ``capacity - 1`` slots, the
    offending name up to ``capacity - 2`` so that the closing quote usually
    fits, and the quote is written only if a slot remains.

    Args:
        reason: The reason phrase.
        name: The offending option name or character.
        capacity: Buffer size including the terminator slot.

    Returns:
        The formatted message, at most ``capacity - 1`` characters long.
    """
    limit = capacity - 1
    text = (reason + _SEPARATOR)[:limit]
    room = max(limit - 1 - len(text), 0)
    text += name[:room]
    if len(text) < limit:
        text += "'"
    return text


def _reason_of(message: str) -> str:
    for reason in (MSG_INVALID, MSG_MISSING, MSG_TOOMANY):
        if message.startswith(reason):
            return reason
    return message.split(_SEPARATOR, 1)[0]


def raise_for_error(state: ParserState) -> None:
    """Raise :class:`OptionError` if the last call on ``state`` failed.

    Args:
        state: The parser state to inspect.

    Raises:
        OptionError: If ``state.error_message`` is non-empty.
    """
    if not state.error_message:
        return
    raise OptionError(
        state.error_message,
        reason=_reason_of(state.error_message),
        option=state.last_option,
    )
