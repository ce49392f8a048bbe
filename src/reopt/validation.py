"""Validation helpers for option descriptors.

The scanners trust their descriptors and never raise; these helpers let a
caller check a short spec or a long table once, up front, and fail loudly on
definitions that could never parse the way they read.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from reopt.errors import DescriptorError
from reopt.types import ERROR, LongOption

logger = logging.getLogger(__name__)

__all__ = [
    "validate_short_spec",
    "validate_table",
]


def validate_short_spec(spec: str) -> str:
    """Check a short specification string.

    Args:
        spec: The short specification string.

    Returns:
        The spec, unchanged.

    Raises:
        DescriptorError: If the spec starts with ``:``, contains three
            colons in a row, or uses ``-`` or ``?`` as a flag.
    """
    if spec.startswith(":"):
        raise DescriptorError(f"Short spec cannot start with ':': {spec!r}")
    if ":::" in spec:
        raise DescriptorError(f"Short spec has more than two colons after a flag: {spec!r}")
    flags = [c for c in spec if c != ":"]
    if "-" in flags:
        raise DescriptorError(f"'-' cannot be used as a short option: {spec!r}")
    if ERROR in flags:
        raise DescriptorError(
            f"'{ERROR}' is reserved for errors and cannot be a short option: {spec!r}"
        )
    seen: set[str] = set()
    for flag in flags:
        if flag in seen:
            logger.warning(
                "Short option %r appears more than once in %r; the first definition wins",
                flag,
                spec,
            )
        seen.add(flag)
    return spec


def validate_table(table: Sequence[LongOption]) -> Sequence[LongOption]:
    """Check a long option table.

    Duplicate long names are rejected because the later entry could never
    match. Duplicate short characters only log a warning; the short fallback
    reports the first entry.

    Args:
        table: The long option table.

    Returns:
        The table, unchanged.

    Raises:
        DescriptorError: If an entry is not a ``LongOption`` or a long name
            is repeated.
    """
    names: set[str] = set()
    shorts: set[str | int] = set()
    for index, entry in enumerate(table):
        if not isinstance(entry, LongOption):
            raise DescriptorError(
                f"Table entry {index} must be a LongOption, got {type(entry).__name__}"
            )
        if entry.is_end:
            break
        if entry.name:
            if entry.name in names:
                raise DescriptorError(f"Duplicate long option name: {entry.name!r}")
            names.add(entry.name)
        if entry.short is not None:
            if entry.short in shorts:
                logger.warning(
                    "Code %r is shared by more than one entry; entry %d is unreachable "
                    "through short syntax",
                    entry.short,
                    index,
                )
            shorts.add(entry.short)
    return table
