"""Coercion of string-valued options (Actions inputs are always strings)."""

import re

_USER_SEPARATORS = re.compile(r"[,\n]")


def is_enabled(raw: str | None) -> bool:
    """True only for the exact literal "true".

    "True", "1", "yes" and "" are all false, so a mistyped flag leaves the
    feature off.
    """
    return raw == "true"


def parse_user_list(raw: str | None) -> frozenset[str]:
    """Split a comma or newline separated list of logins."""
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in _USER_SEPARATORS.split(raw) if part.strip())
