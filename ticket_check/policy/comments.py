"""Texts posted as PR review comments."""

from ticket_check.models import SourceKind
from ticket_check.policy.templates import TICKET_NUMBER, render_ticket_link

TICKET_LINK_INTRO = "See the ticket for this pull request: "

# Other tooling greps for "branch name", "body" and "ticket URL"; keep them.
_EXPLANATIONS = {
    SourceKind.BRANCH: (
        "Hey! I noticed that your PR title didn't reference a ticket, so I took the ticket number "
        "from your branch name and updated the title to: {title}"
    ),
    SourceKind.BODY: (
        "Hey! I noticed that your PR title didn't reference a ticket, so I took the ticket number "
        "from your PR body and updated the title to: {title}"
    ),
    SourceKind.BODY_URL: (
        "Hey! I noticed that your PR title didn't reference a ticket, so I took the ticket number "
        "from the ticket URL in your PR body and updated the title to: {title}"
    ),
}


def compose_update_explanation(source: SourceKind, new_title: str) -> str:
    """Explain a title rewrite; raises KeyError for SourceKind.TITLE."""
    return _EXPLANATIONS[source].format(title=new_title)


def compose_ticket_link(ticket_link: str, ticket_number: str | None) -> str | None:
    """Link message, or None when the template or the ticket number is missing."""
    if not ticket_link or TICKET_NUMBER not in ticket_link:
        return None
    if not ticket_number:
        return None
    return TICKET_LINK_INTRO + render_ticket_link(ticket_link, ticket_number)
