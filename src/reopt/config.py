"""Configuration loading from environment variables.

Only the ``reopt`` command-line front end reads configuration; the parsing
functions themselves take everything they need as arguments.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Valid log levels
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Valid output formats for the front end
VALID_OUTPUT_FORMATS = frozenset({"shell", "json"})


@dataclass(frozen=True)
class Config:
    """Front-end configuration loaded from environment.

    This dataclass is frozen (immutable) to prevent accidental modification
    after creation.
    """

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False
    diagnostic_tags: str = ""  # e.g. "errors,permute" or "*"

    # Output
    output_format: str = "shell"

    # Parsing
    # False when POSIXLY_CORRECT is set: stop at the first non-option
    permute: bool = True


def _validate_log_level(value: str, default: str = "WARNING") -> str:
    """Validate and normalize a log level string.

    Args:
        value: The log level string to validate.
        default: The default value to use if invalid.

    Returns:
        The validated log level (uppercase), or the default if invalid.

    Logs a warning if the value is invalid.
    """
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        logging.warning(
            "Invalid REOPT_LOG_LEVEL: '%s' is not valid, using default '%s'. Valid values: %s",
            value,
            default,
            ", ".join(sorted(VALID_LOG_LEVELS)),
        )
        return default
    return normalized


def _validate_output_format(value: str, default: str = "shell") -> str:
    """Validate and normalize an output format string.

    Args:
        value: The output format string to validate.
        default: The default value to use if invalid.

    Returns:
        The validated output format (lowercase), or the default if invalid.

    Logs a warning if the value is invalid.
    """
    normalized = value.strip().lower()
    if normalized not in VALID_OUTPUT_FORMATS:
        logging.warning(
            "Invalid REOPT_OUTPUT_FORMAT: '%s' is not valid, using default '%s'. Valid values: %s",
            value,
            default,
            ", ".join(sorted(VALID_OUTPUT_FORMATS)),
        )
        return default
    return normalized


def _parse_bool(value: str) -> bool:
    """Parse a string as a boolean.

    Args:
        value: The string value to parse.

    Returns:
        True if value is "true", "1", or "yes" (case-insensitive), False otherwise.
    """
    return value.strip().lower() in ("true", "1", "yes")


def load_config(env_file: Path | None = None) -> Config:
    """Load configuration from environment variables.

    Args:
        env_file: Optional path to .env file. If not provided,
                  looks for .env in current directory.

    Returns:
        Config object with loaded values.

    Invalid values are logged and replaced by their defaults.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    log_level = _validate_log_level(os.getenv("REOPT_LOG_LEVEL", "WARNING"))
    log_json = _parse_bool(os.getenv("REOPT_LOG_JSON", ""))
    diagnostic_tags = os.getenv("REOPT_DIAGNOSTIC_TAGS", "").strip()
    output_format = _validate_output_format(os.getenv("REOPT_OUTPUT_FORMAT", "shell"))

    # GNU getopt convention: any non-empty value disables permutation
    permute = not os.getenv("POSIXLY_CORRECT", "")

    return Config(
        log_level=log_level,
        log_json=log_json,
        diagnostic_tags=diagnostic_tags,
        output_format=output_format,
        permute=permute,
    )
