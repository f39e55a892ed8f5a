"""Compile user-supplied ticket patterns.

Patterns are written the way GitHub Actions users know them: JavaScript
named groups ``(?<ticketNumber>...)`` and a flag string such as ``"gim"``.
Both are mapped onto Python's ``re`` here, once, before any API call.
"""

import re
from dataclasses import dataclass

from ticket_check.exceptions import PatternConfigError

TICKET_GROUP = "ticketNumber"

# "(?<name>" but not lookbehind "(?<=" / "(?<!"; a "(" after an odd run of
# backslashes is a literal paren
_JS_NAMED_GROUP = re.compile(r"(?<!\\)((?:\\\\)*)\(\?<(?![=!])([A-Za-z_][A-Za-z0-9_]*)>")

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "g": 0,
    "y": 0,
    "d": 0,
    "v": 0,
}


@dataclass(frozen=True)
class TicketPattern:
    """Compiled pattern for one source (title, branch, body, body URL)."""

    source: str
    flags: str
    regex: re.Pattern[str] | None
    sticky: bool = False

    @property
    def enabled(self) -> bool:
        return self.regex is not None

    @property
    def has_ticket_group(self) -> bool:
        return self.regex is not None and TICKET_GROUP in self.regex.groupindex

    def search(self, text: str) -> re.Match[str] | None:
        if self.regex is None:
            return None
        if self.sticky:
            return self.regex.match(text)
        return self.regex.search(text)


def translate_named_groups(source: str) -> str:
    """Rewrite ``(?<name>`` to Python's ``(?P<name>``."""
    return _JS_NAMED_GROUP.sub(r"\1(?P<\2>", source)


def parse_flags(flags: str, option: str) -> tuple[int, bool]:
    """Return (re flags, sticky) for a JavaScript-style flag string.

    ``g``, ``u``, ``d`` and ``v`` change nothing for a single search.
    """
    value = 0
    for letter in flags.strip():
        if letter not in _FLAG_MAP:
            raise PatternConfigError(option, f"unknown flag {letter!r} in {flags!r}")
        value |= _FLAG_MAP[letter]
    return value, "y" in flags


def compile_pattern(source: str, flags: str = "", option: str = "pattern") -> TicketPattern:
    """Compile a pattern; an empty source yields a disabled pattern.

    Digit and word classes are ASCII-only, as in JavaScript.

    Raises PatternConfigError on bad syntax or unknown flags.
    """
    re_flags, sticky = parse_flags(flags or "", f"{option}Flags")
    if not source:
        return TicketPattern(source=source, flags=flags, regex=None)
    try:
        regex = re.compile(translate_named_groups(source), re_flags | re.ASCII)
    except re.error as e:
        raise PatternConfigError(option, f"{source!r}: {e}") from e
    return TicketPattern(source=source, flags=flags, regex=regex, sticky=sticky)
