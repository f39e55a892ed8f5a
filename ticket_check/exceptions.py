"""Errors raised by ticket check.

Anything derived from TicketCheckError is fatal for a run: it is reported
once through the failure hook and the process exits non-zero.
"""


class TicketCheckError(Exception):
    """Base class for fatal ticket check errors."""

    pass


class ConfigError(TicketCheckError):
    """Raised when configuration is invalid."""

    pass


class PatternConfigError(ConfigError):
    """Raised when a configured pattern (or its flags) cannot be compiled."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Invalid {option}: {message}")


class EventError(ConfigError):
    """Raised when the event payload is missing or is not a pull request."""

    pass


class GitPlatformError(TicketCheckError):
    """Raised when a Git platform API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
