"""Ticket policy engine: extraction, title decision, comments and dedup."""

from ticket_check.policy.comments import compose_ticket_link, compose_update_explanation
from ticket_check.policy.decision import TicketPatterns, decide_title
from ticket_check.policy.dedup import is_duplicate
from ticket_check.policy.exemption import is_exempt
from ticket_check.policy.extractor import extract
from ticket_check.policy.flags import is_enabled, parse_user_list
from ticket_check.policy.patterns import TicketPattern, compile_pattern

__all__ = [
    "TicketPattern",
    "TicketPatterns",
    "compile_pattern",
    "compose_ticket_link",
    "compose_update_explanation",
    "decide_title",
    "extract",
    "is_duplicate",
    "is_enabled",
    "is_exempt",
    "parse_user_list",
]
