"""Git platform adapters."""

from ticket_check.adapters.base import GitPlatformAdapter
from ticket_check.adapters.github import GitHubAdapter
from ticket_check.exceptions import GitPlatformError

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
