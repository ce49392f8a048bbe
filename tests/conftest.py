"""Shared pytest fixtures for reopt tests.

Builders such as ``make_state`` live in ``tests.helpers`` and are imported
directly; this module only holds fixtures that need setup or teardown.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tests.helpers import ENV_VARS


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every environment variable the front end reads."""
    # setenv first so teardown also removes values load_dotenv() adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def empty_env_file(tmp_path: Path) -> Path:
    """An empty .env file, so load_dotenv() does not search parent directories."""
    env_file = tmp_path / ".env"
    env_file.touch()
    return env_file


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo handler and level changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    reopt_level = logging.getLogger("reopt").level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("reopt").setLevel(reopt_level)
