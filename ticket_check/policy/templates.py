"""%name% placeholder substitution for titles and ticket links."""

from typing import Mapping

PREFIX = "%prefix%"
ID = "%id%"
TITLE = "%title%"
TICKET_NUMBER = "%ticketNumber%"

TITLE_PLACEHOLDERS = frozenset({PREFIX, ID, TITLE})
LINK_PLACEHOLDERS = frozenset({TICKET_NUMBER})


def render(template: str, values: Mapping[str, str], allowed: frozenset[str]) -> str:
    """Replace each allowed placeholder with its value in a single pass.

    Placeholders outside ``allowed`` (or without a value) stay in the output
    as written. Substituted values are never rescanned, so a title that
    itself contains "%id%" comes through verbatim.
    """
    unknown = set(values) - allowed
    if unknown:
        raise ValueError(f"Unsupported placeholders: {sorted(unknown)}")
    out: list[str] = []
    i = 0
    while i < len(template):
        if template[i] == "%":
            end = template.find("%", i + 1)
            if end != -1:
                token = template[i : end + 1]
                if token in values:
                    out.append(values[token])
                    i = end + 1
                    continue
        out.append(template[i])
        i += 1
    return "".join(out)


def render_title(title_format: str, prefix: str, ticket_number: str, title: str) -> str:
    return render(title_format, {PREFIX: prefix, ID: ticket_number, TITLE: title}, TITLE_PLACEHOLDERS)


def render_ticket_link(ticket_link: str, ticket_number: str) -> str:
    return render(ticket_link, {TICKET_NUMBER: ticket_number}, LINK_PLACEHOLDERS)
