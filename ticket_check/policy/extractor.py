"""Pull a ticket number out of a title, branch name, body or body URL."""

import logging

from ticket_check.models import MatchResult, SourceKind
from ticket_check.policy.patterns import TICKET_GROUP, TicketPattern

LOG = logging.getLogger("ticket_check.policy.extractor")


def extract(text: str, pattern: TicketPattern, source: SourceKind) -> MatchResult | None:
    """Return the ticket number captured by ``pattern`` in ``text``.

    None when the pattern is disabled, does not match, has no ticketNumber
    group, or the group did not take part in the match (or is empty).
    """
    match = pattern.search(text or "")
    if match is None:
        LOG.debug("%s: no match for %r", source.value, pattern.source)
        return None
    if not pattern.has_ticket_group:
        LOG.debug("%s: pattern %r has no %s group", source.value, pattern.source, TICKET_GROUP)
        return None
    ticket_number = match.group(TICKET_GROUP)
    if not ticket_number:
        LOG.debug("%s: %s group did not capture", source.value, TICKET_GROUP)
        return None
    return MatchResult(source=source, ticket_number=ticket_number)
