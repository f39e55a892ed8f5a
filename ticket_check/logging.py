"""Logging from config and env.

Levels (inclusive):
- ERROR: fatal run failures only
- WARNING: skipped features (bad link template, missing token) and ERROR
- INFO: decisions, title updates, posted comments, WARNING, and ERROR
- DEBUG: per-source extraction details, HTTP connection logs and all levels above

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
Records go to stderr; stdout is left to GitHub Actions workflow commands.
"""

import logging
import sys
from typing import TextIO

from ticket_check.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty below DEBUG: one line per request/connection
NOISY_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class TicketCheckLogging:
    """Configures root logger from LoggingConfig (YAML + env LOGGING_*)."""

    def __init__(self, config: LoggingConfig, stream: TextIO | None = None) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._stream = stream

    @property
    def level(self) -> int:
        return self._level

    def setup(self) -> None:
        """Apply level and format to the root logger and quiet HTTP client logs."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=self._stream or sys.stderr,
            force=True,
        )
        noisy_level = logging.DEBUG if self._level <= logging.DEBUG else logging.WARNING
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(noisy_level)
