"""Shared fixtures: a recording adapter and an isolated environment."""

import os
from typing import Any, List

import pytest

from ticket_check.adapters.base import GitPlatformAdapter
from ticket_check.config import TicketConfig
from ticket_check.models import PullRequestContext, Review


class FakeAdapter(GitPlatformAdapter):
    """Records every call; reviews are served from ``existing``."""

    def __init__(self, existing: List[str] | None = None) -> None:
        self.existing = list(existing or [])
        self.title_updates: List[tuple] = []
        self.list_calls: List[tuple] = []
        self.posted: List[dict] = []

    def update_pr_title(self, owner: str, repo: str, pr_number: int, title: str) -> None:
        self.title_updates.append((owner, repo, pr_number, title))

    def list_pr_reviews(self, owner: str, repo: str, pr_number: int) -> List[Review]:
        self.list_calls.append((owner, repo, pr_number))
        return [Review(id=i, body=b) for i, b in enumerate(self.existing, 1)]

    def create_pr_review(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        body: str,
        event: str = "COMMENT",
    ) -> Review:
        self.posted.append({"owner": owner, "repo": repo, "pr_number": pr_number, "body": body, "event": event})
        self.existing.append(body)
        return Review(id=len(self.existing), body=body)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop Actions inputs and tokens from the real environment."""
    for key in list(os.environ):
        if key.startswith(("INPUT_", "GITHUB_", "WEBHOOK_", "LOGGING_")):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


def make_context(
    title: str = "Test PR",
    body: str = "Test body",
    branch: str = "feature-branch",
    author: str = "testuser",
) -> PullRequestContext:
    return PullRequestContext(
        owner="testowner",
        repo="testrepo",
        number=123,
        title=title,
        body=body,
        branch=branch,
        author=author,
        author_kind="User",
    )


def make_config(**overrides: Any) -> TicketConfig:
    """Policy used throughout the tests (TEST- tickets)."""
    values = {
        "titlePattern": r"^(TEST)-(?<ticketNumber>\d+)",
        "titlePatternFlags": "gi",
        "branchPattern": r"^(TEST)-(?<ticketNumber>\d+)",
        "branchPatternFlags": "gi",
        "bodyPattern": r"(TEST)-(?<ticketNumber>\d+)",
        "bodyPatternFlags": "gim",
        "bodyURLPattern": "",
        "bodyURLPatternFlags": "gim",
        "titleFormat": "%prefix%%id%: %title%",
        "ticketPrefix": "TEST-",
        "exemptUsers": "",
        "commentOnTitleUpdate": "false",
        "commentWithTicketLink": "false",
        "ticketLink": "",
    }
    values.update(overrides)
    return TicketConfig(**values)


@pytest.fixture
def context_factory():
    return make_context


@pytest.fixture
def config_factory():
    return make_config


@pytest.fixture
def adapter_with_reviews():
    """Build a FakeAdapter pre-seeded with existing review bodies."""
    return lambda *bodies: FakeAdapter(existing=list(bodies))
