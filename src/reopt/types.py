"""Descriptor types shared by the short and long option scanners.

This module defines the vocabulary the engine speaks:

- ``ArgType``: whether an option takes no value, a required value, or an
  optional value. The integer value equals the number of colons the option
  carries in a short specification string.
- ``LongOption``: one record of a long option table.
- ``DONE`` / ``ERROR``: the two sentinel result codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from reopt.errors import DescriptorError

__all__ = [
    "ArgType",
    "DONE",
    "END",
    "ERROR",
    "FALLBACK_MAX",
    "LongOption",
    "OptionCode",
    "ParsedOption",
]

# Result code signalling that no further options remain.
DONE = -1

# Result code signalling an in-band parse error.
ERROR = "?"

# Short equivalents with a code point in 1..FALLBACK_MAX-1 are reachable
# through short-option syntax; anything else is long-only.
FALLBACK_MAX = 127

OptionCode = str | int


class ArgType(IntEnum):
    """Argument kinds, valued by their colon count in a short spec."""

    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


def _normalize_short(name: str | None, short: object) -> str | int | None:
    if short is None:
        return None
    if isinstance(short, bool):
        raise DescriptorError(f"Short equivalent for {name!r} must not be a bool")
    if isinstance(short, int):
        if short < 0:
            raise DescriptorError(f"Short equivalent for {name!r} must be non-negative, got {short}")
        if 0 < short < FALLBACK_MAX:
            return chr(short)
        return short
    if isinstance(short, str):
        if len(short) != 1:
            raise DescriptorError(
                f"Short equivalent for {name!r} must be a single character, got {short!r}"
            )
        return short
    raise DescriptorError(
        f"Short equivalent for {name!r} must be a character or an integer code, "
        f"got {type(short).__name__}"
    )


@dataclass(frozen=True)
class LongOption:
    """One entry of a long option table.

    Attributes:
        name: The long name matched after ``--``. ``None`` (or an empty
            name) marks a short-only entry that is reachable only through
            the short fallback.
        short: The code reported when the entry matches. A single character
            (integers in 1..126 are converted to one) enables ``-x`` syntax;
            any other integer is a long-only code.
        argtype: Whether the option takes a value.
    """

    name: str | None
    short: str | int | None = None
    argtype: ArgType = ArgType.NONE

    def __post_init__(self) -> None:
        """Validate and normalize the descriptor."""
        if self.name is not None:
            if "=" in self.name:
                raise DescriptorError(f"Long option name cannot contain '=': {self.name!r}")
            if self.name.startswith("-"):
                raise DescriptorError(f"Long option name cannot start with '-': {self.name!r}")
        short = _normalize_short(self.name, self.short)
        if short in (":", ERROR):
            raise DescriptorError(f"{short!r} is reserved and cannot be used as a short option")
        if self.name and short is None:
            raise DescriptorError(f"Long option {self.name!r} needs a short equivalent or code")
        object.__setattr__(self, "short", short)
        object.__setattr__(self, "argtype", ArgType(self.argtype))

    @property
    def is_end(self) -> bool:
        """Return True if this record terminates a table."""
        return not self.name and self.short is None

    @property
    def fallback_char(self) -> str | None:
        """Return the character usable in short syntax, or None for long-only."""
        if isinstance(self.short, str) and 0 < ord(self.short) < FALLBACK_MAX:
            return self.short
        return None


# Terminating record; tables may end with it or simply end.
END = LongOption(None)


@dataclass(frozen=True)
class ParsedOption:
    """A single result yielded by :func:`reopt.helpers.iter_options`.

    Attributes:
        code: The option character/code, or ``ERROR``.
        argument: The attached value, if any.
        long_index: Index of the matched long table entry, or -1.
        error: The error message when ``code`` is ``ERROR``, else empty.
    """

    code: OptionCode
    argument: str | None = None
    long_index: int = -1
    error: str = ""

    @property
    def failed(self) -> bool:
        """Return True if this result reports a parse error."""
        return bool(self.error)
