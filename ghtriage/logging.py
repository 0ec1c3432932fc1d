"""Logging setup for the ghtriage CLI.

The triage list is the program's output on stdout, so log records always
go to stderr. HTTP connection chatter from urllib3 (under requests) is
kept at WARNING unless DEBUG is requested.

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging
import sys

from ghtriage.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUIET_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names mean INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class TriageLogging:
    """Routes ghtriage logs to stderr at the configured level."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=sys.stderr,
            force=True,
        )
        third_party = logging.DEBUG if self._level <= logging.DEBUG else logging.WARNING
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(third_party)
