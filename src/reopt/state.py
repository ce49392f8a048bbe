"""Parser state shared by every scanning operation.

All parsing state lives in a :class:`ParserState` value owned by the caller.
Nothing is kept at module level, so any number of parses may run side by
side, including a nested parse of a sub-command's options.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass, field

from reopt.types import OptionCode

__all__ = ["ParserState", "initialize"]


@dataclass
class ParserState:
    """Mutable state for one logical parse.

    Fields the caller may read after any ``next_*`` call:

    - ``last_option``: the option character/code just examined (the offending
      character after a short-option error), or ``None``.
    - ``last_argument``: the option's value, or ``None``.
    - ``error_message``: empty unless the call returned ``ERROR``.
    - ``long_index``: index of the matched long table entry, or -1.

    ``permute`` may be set by the caller before or between calls.

    Attributes:
        tokens: The caller's token list. It is reordered in place when
            non-options are permuted, never copied.
        permute: Move non-options behind the options (default) instead of
            stopping at the first one.
        cursor: Index of the next token to examine.
        last_option: See above.
        last_argument: See above.
        error_message: See above.
        long_index: See above.
        cluster_offset: Position inside the current short-option cluster.
    """

    tokens: MutableSequence[str] = field(default_factory=list)
    permute: bool = True
    cursor: int = 0
    last_option: OptionCode | None = None
    last_argument: str | None = None
    error_message: str = ""
    long_index: int = -1
    cluster_offset: int = 0

    @classmethod
    def from_tokens(cls, tokens: MutableSequence[str]) -> ParserState:
        """Create a state initialized over ``tokens``."""
        state = cls()
        initialize(state, tokens)
        return state

    def reset(self, tokens: MutableSequence[str] | None = None) -> None:
        """Re-initialize in place, optionally over a new token list."""
        initialize(self, self.tokens if tokens is None else tokens)

    def current(self) -> str | None:
        """Return the token under the cursor, or None past the end."""
        if self.cursor < len(self.tokens):
            return self.tokens[self.cursor]
        return None

    def clear_result(self) -> None:
        """Clear the per-call result fields."""
        self.last_option = None
        self.last_argument = None
        self.error_message = ""
        self.long_index = -1


def initialize(state: ParserState, tokens: MutableSequence[str]) -> None:
    """Start a fresh parse of ``tokens`` on ``state``.

    Index 0 is treated as the program name and skipped when present.
    Calling this again at any point discards all progress, so a single state
    value may be reused across independent parses.

    Args:
        state: The state to (re)initialize.
        tokens: The token list to parse. It is referenced, not copied.
    """
    state.tokens = tokens
    state.permute = True
    state.cursor = 1 if len(tokens) > 0 else 0
    state.cluster_offset = 0
    state.clear_result()
