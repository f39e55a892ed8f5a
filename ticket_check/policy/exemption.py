"""Authors that skip the ticket policy entirely."""

from typing import AbstractSet


def is_exempt(author: str, exempt_users: AbstractSet[str]) -> bool:
    return bool(author) and author in exempt_users
