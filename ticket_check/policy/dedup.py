"""Avoid posting the same ticket link twice on one pull request."""

from typing import Iterable


def is_duplicate(message: str, existing_bodies: Iterable[str]) -> bool:
    """True if any existing review body equals ``message`` exactly."""
    return any(body == message for body in existing_bodies)
