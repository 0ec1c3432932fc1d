"""Tests for ghtriage.logging (stderr routing, levels, urllib3 noise)."""

import logging
import sys
from typing import Iterator

import pytest

from ghtriage.config import LoggingConfig
from ghtriage.logging import DEFAULT_FORMAT, LEVELS, TriageLogging, _resolve_level


@pytest.fixture(autouse=True)
def _reset_urllib3() -> Iterator[None]:
    yield
    logging.getLogger("urllib3").setLevel(logging.NOTSET)


class TestResolveLevel:
    def test_known_levels(self) -> None:
        for name, value in LEVELS.items():
            assert _resolve_level(name) == value

    def test_lowercase_and_whitespace(self) -> None:
        assert _resolve_level(" debug ") == logging.DEBUG

    def test_unknown_level_returns_info(self) -> None:
        assert _resolve_level("TRACE") == logging.INFO
        assert _resolve_level("") == logging.INFO


class TestTriageLogging:
    def test_setup_sets_root_level(self) -> None:
        TriageLogging(LoggingConfig(level="WARNING", format="%(message)s")).setup()
        assert logging.root.level == logging.WARNING

    def test_logs_go_to_stderr(self) -> None:
        """stdout is reserved for the triage list."""
        TriageLogging(LoggingConfig(level="INFO")).setup()
        assert logging.root.handlers[0].stream is sys.stderr

    def test_setup_applies_format(self) -> None:
        custom = "%(levelname)s || %(message)s"
        TriageLogging(LoggingConfig(level="INFO", format=custom)).setup()
        assert logging.root.handlers[0].formatter._fmt == custom

    def test_empty_format_uses_default(self) -> None:
        TriageLogging(LoggingConfig(level="INFO", format="")).setup()
        assert logging.root.handlers[0].formatter._fmt == DEFAULT_FORMAT

    def test_urllib3_quiet_below_debug(self) -> None:
        TriageLogging(LoggingConfig(level="INFO")).setup()
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_urllib3_verbose_at_debug(self) -> None:
        TriageLogging(LoggingConfig(level="DEBUG")).setup()
        assert logging.getLogger("urllib3").level == logging.DEBUG
