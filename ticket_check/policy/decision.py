"""Decide whether a PR title needs a ticket and build the new title."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ticket_check.exceptions import PatternConfigError
from ticket_check.models import Decision, MatchResult, Outcome, PullRequestContext, SourceKind
from ticket_check.models.decision import UPDATE_OUTCOMES
from ticket_check.policy.extractor import extract
from ticket_check.policy.patterns import TicketPattern, compile_pattern
from ticket_check.policy.templates import render_title

if TYPE_CHECKING:
    from ticket_check.config import TicketConfig

LOG = logging.getLogger("ticket_check.policy.decision")


@dataclass(frozen=True)
class TicketPatterns:
    """The four compiled patterns of a policy."""

    title: TicketPattern
    branch: TicketPattern
    body: TicketPattern
    body_url: TicketPattern

    @classmethod
    def from_config(cls, config: "TicketConfig") -> "TicketPatterns":
        """Compile all patterns; raises PatternConfigError on the first bad one.

        The title pattern must not be empty; an empty branch, body or body
        URL pattern disables that source.
        """
        if not config.title_pattern:
            raise PatternConfigError("titlePattern", "must not be empty")
        return cls(
            title=compile_pattern(config.title_pattern, config.title_pattern_flags, "titlePattern"),
            branch=compile_pattern(config.branch_pattern, config.branch_pattern_flags, "branchPattern"),
            body=compile_pattern(config.body_pattern, config.body_pattern_flags, "bodyPattern"),
            body_url=compile_pattern(config.body_url_pattern, config.body_url_pattern_flags, "bodyURLPattern"),
        )


def title_ticket(title: str, patterns: TicketPatterns) -> MatchResult | None:
    return extract(title, patterns.title, SourceKind.TITLE)


def find_source_ticket(context: PullRequestContext, patterns: TicketPatterns) -> MatchResult | None:
    """First ticket found in branch, then body, then body URL.

    Later sources are only evaluated when earlier ones give nothing.
    """
    candidates = (
        (context.branch, patterns.branch, SourceKind.BRANCH),
        (context.body, patterns.body, SourceKind.BODY),
        (context.body, patterns.body_url, SourceKind.BODY_URL),
    )
    for text, pattern, source in candidates:
        result = extract(text, pattern, source)
        if result is not None:
            return result
    return None


def decide_title(
    context: PullRequestContext,
    patterns: TicketPatterns,
    title_format: str,
    ticket_prefix: str,
) -> Decision:
    """Keep a title that already has a ticket; otherwise derive one.

    A title matching the title pattern is never rewritten, even when the
    branch or body names a different ticket.
    """
    current = title_ticket(context.title, patterns)
    if current is not None:
        LOG.info("PR #%s: title already references ticket %s", context.number, current.ticket_number)
        return Decision(outcome=Outcome.ALREADY_VALID, match=current)

    found = find_source_ticket(context, patterns)
    if found is None:
        LOG.info("PR #%s: no ticket in title, branch or body", context.number)
        return Decision(outcome=Outcome.NO_TICKET_FOUND)

    new_title = render_title(title_format, ticket_prefix, found.ticket_number, context.title)
    LOG.info(
        "PR #%s: ticket %s found in %s, new title %r",
        context.number,
        found.ticket_number,
        found.source.value,
        new_title,
    )
    return Decision(outcome=UPDATE_OUTCOMES[found.source], match=found, new_title=new_title)
