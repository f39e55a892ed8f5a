"""Ticket number captured from one candidate text."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SourceKind(str, Enum):
    """Which text a ticket number was taken from."""

    TITLE = "title"
    BRANCH = "branch"
    BODY = "body"
    BODY_URL = "body_url"


class MatchResult(BaseModel):
    """Successful extraction; there is no partially populated form."""

    model_config = ConfigDict(frozen=True)

    source: SourceKind
    ticket_number: str = Field(min_length=1)
