"""Outcome of the title check."""

from enum import Enum

from pydantic import BaseModel

from ticket_check.models.match import MatchResult, SourceKind


class Outcome(str, Enum):
    EXEMPT = "exempt"
    ALREADY_VALID = "already_valid"
    UPDATED_FROM_BRANCH = "updated_from_branch"
    UPDATED_FROM_BODY = "updated_from_body"
    UPDATED_FROM_BODY_URL = "updated_from_body_url"
    NO_TICKET_FOUND = "no_ticket_found"


UPDATE_OUTCOMES = {
    SourceKind.BRANCH: Outcome.UPDATED_FROM_BRANCH,
    SourceKind.BODY: Outcome.UPDATED_FROM_BODY,
    SourceKind.BODY_URL: Outcome.UPDATED_FROM_BODY_URL,
}


class Decision(BaseModel):
    """What to do with the title; new_title is set only for updates."""

    outcome: Outcome
    match: MatchResult | None = None
    new_title: str | None = None

    @property
    def title_updated(self) -> bool:
        return self.new_title is not None
