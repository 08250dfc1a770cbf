"""Unit tests for src/core/config.py"""

import importlib
from typing import Generator, Optional

import pytest

from src.core import config
from src.core.config import DEFAULT_LOG_LEVEL, read_log_level


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Settings are read at import time. Restore the environment and reload at teardown so other tests see the real settings."""
    try:
        yield
    finally:
        monkeypatch.undo()
        importlib.reload(config)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("DEBUG", "DEBUG"),
        ("info", "INFO"),
        (" error ", "ERROR"),
        (None, DEFAULT_LOG_LEVEL),
        ("VERBOSE", DEFAULT_LOG_LEVEL),
        ("", DEFAULT_LOG_LEVEL),
    ],
)
def test_read_log_level(value: Optional[str], expected: str) -> None:
    assert read_log_level(value) == expected


def test_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, reload_config: None
) -> None:
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "debug")
    assert importlib.reload(config).LOG_LEVEL == "DEBUG"


def test_unknown_log_level_in_environment(
    monkeypatch: pytest.MonkeyPatch, reload_config: None
) -> None:
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "VERBOSE")
    assert importlib.reload(config).LOG_LEVEL == DEFAULT_LOG_LEVEL
