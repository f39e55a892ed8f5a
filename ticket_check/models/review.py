"""Existing review on a pull request."""

from pydantic import BaseModel


class Review(BaseModel):
    """Pull request review (top-level review body, not line comments)."""

    id: int
    body: str = ""
    author: str = ""
    state: str = "COMMENTED"
