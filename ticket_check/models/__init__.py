"""Data models for pull requests, ticket matches, decisions and reviews (Pydantic)."""

from ticket_check.models.decision import Decision, Outcome
from ticket_check.models.match import MatchResult, SourceKind
from ticket_check.models.pr import PullRequestContext
from ticket_check.models.review import Review

__all__ = ["Decision", "MatchResult", "Outcome", "PullRequestContext", "Review", "SourceKind"]
