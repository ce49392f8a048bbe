"""reopt - reentrant command-line option parsing.

A replacement for ``getopt()`` / ``getopt_long()`` that keeps all parsing
state in a caller-owned :class:`ParserState`, so parses can run side by side
or nest (e.g. a sub-command's options parsed with a different spec once the
outer parse stops).

Example::

    state = ParserState.from_tokens(["prog", "-a", "--delay", "10", "file"])
    while (code := next_long(state, table)) != DONE:
        ...
    rest = drain_positionals(state)
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("reopt")
except PackageNotFoundError:
    # Package is not installed (e.g., running from source without pip install)
    __version__ = "0.0.0.dev0"

# Re-export core public API
from reopt.errors import (
    ERROR_CAPACITY,
    MSG_INVALID,
    MSG_MISSING,
    MSG_TOOMANY,
    DescriptorError,
    OptionError,
    format_error,
    raise_for_error,
)
from reopt.helpers import drain_positionals, iter_options, parse_long_spec
from reopt.long import next_long, synthesize_short_spec
from reopt.permute import next_positional
from reopt.short import next_short
from reopt.state import ParserState, initialize
from reopt.types import DONE, END, ERROR, ArgType, LongOption, ParsedOption
from reopt.validation import validate_short_spec, validate_table

# NOTE: Update this list when adding new exports to this module.
__all__ = [
    "__version__",
    "ArgType",
    "DONE",
    "DescriptorError",
    "END",
    "ERROR",
    "ERROR_CAPACITY",
    "LongOption",
    "MSG_INVALID",
    "MSG_MISSING",
    "MSG_TOOMANY",
    "OptionError",
    "ParsedOption",
    "ParserState",
    "drain_positionals",
    "format_error",
    "initialize",
    "iter_options",
    "next_long",
    "next_positional",
    "next_short",
    "parse_long_spec",
    "raise_for_error",
    "synthesize_short_spec",
    "validate_short_spec",
    "validate_table",
]
