"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from ticket_check.models import Review


class GitPlatformAdapter(ABC):
    """Pull request operations the ticket check needs from a hosting platform.

    Implementations raise GitPlatformError on any API failure.
    """

    @abstractmethod
    def update_pr_title(self, owner: str, repo: str, pr_number: int, title: str) -> None:
        """Set the pull request title."""
        ...

    @abstractmethod
    def list_pr_reviews(self, owner: str, repo: str, pr_number: int) -> List[Review]:
        """List reviews posted on the pull request."""
        ...

    @abstractmethod
    def create_pr_review(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        body: str,
        event: str = "COMMENT",
    ) -> Review:
        """Post a review with a body and no line comments."""
        ...
