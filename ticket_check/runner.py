"""
Run the ticket policy against one pull request.

1. Skip exempt authors.
2. Keep a title that already names a ticket; otherwise take the ticket from
   the branch name, the body or a ticket URL in the body and rewrite the
   title.
3. Optionally explain the rewrite in a review comment.
4. Optionally post a link to the ticket named by the final title, unless the
   same link comment is already on the PR.

Platform calls are made one after another; any failure propagates.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from ticket_check.adapters.base import GitPlatformAdapter
from ticket_check.config import TicketConfig
from ticket_check.exceptions import TicketCheckError
from ticket_check.models import Decision, Outcome, PullRequestContext
from ticket_check.policy import (
    TicketPatterns,
    compose_ticket_link,
    compose_update_explanation,
    decide_title,
    is_duplicate,
    is_exempt,
)
from ticket_check.policy.decision import title_ticket

REVIEW_EVENT = "COMMENT"


@dataclass
class RunResult:
    """What a run did to the pull request."""

    decision: Decision
    final_title: str
    posted: List[str] = field(default_factory=list)


def _post_ticket_link(
    context: PullRequestContext,
    config: TicketConfig,
    patterns: TicketPatterns,
    final_title: str,
    adapter: GitPlatformAdapter,
    logger: logging.Logger,
) -> str | None:
    found = title_ticket(final_title, patterns)
    message = compose_ticket_link(config.ticket_link, found.ticket_number if found else None)
    if message is None:
        if found is None:
            logger.info("PR #%s: no ticket number in title %r, skipping ticket link", context.number, final_title)
        else:
            logger.warning("PR #%s: ticketLink has no %%ticketNumber%% placeholder, skipping", context.number)
        return None

    existing = adapter.list_pr_reviews(context.owner, context.repo, context.number)
    if is_duplicate(message, (r.body for r in existing)):
        logger.info("PR #%s: ticket link already posted", context.number)
        return None

    adapter.create_pr_review(context.owner, context.repo, context.number, message, event=REVIEW_EVENT)
    logger.info("PR #%s: posted ticket link for %s", context.number, found.ticket_number)
    return message


def run_ticket_check(
    context: PullRequestContext,
    config: TicketConfig,
    adapter: GitPlatformAdapter,
    log: logging.Logger | None = None,
) -> RunResult:
    """Apply the policy to one PR.

    Raises PatternConfigError before any API call if a pattern is invalid,
    and GitPlatformError if the platform rejects a call.
    """
    logger = log or logging.getLogger("ticket_check.runner")

    if is_exempt(context.author, config.exempt_user_set):
        logger.info(
            "PR #%s: author %s (%s) is exempt, skipping", context.number, context.author, context.author_kind
        )
        return RunResult(decision=Decision(outcome=Outcome.EXEMPT), final_title=context.title)

    patterns = TicketPatterns.from_config(config)
    decision = decide_title(context, patterns, config.title_format, config.ticket_prefix)
    result = RunResult(decision=decision, final_title=context.title)

    if decision.new_title is not None and decision.match is not None:
        adapter.update_pr_title(context.owner, context.repo, context.number, decision.new_title)
        result.final_title = decision.new_title
        logger.info("PR #%s: title updated to %r", context.number, decision.new_title)

        if config.explain_title_update:
            explanation = compose_update_explanation(decision.match.source, decision.new_title)
            adapter.create_pr_review(context.owner, context.repo, context.number, explanation, event=REVIEW_EVENT)
            result.posted.append(explanation)
            logger.info("PR #%s: explained title update", context.number)

    if config.post_ticket_link:
        posted = _post_ticket_link(context, config, patterns, result.final_title, adapter, logger)
        if posted is not None:
            result.posted.append(posted)

    return result


def run_and_report(
    context: PullRequestContext,
    config: TicketConfig,
    adapter: GitPlatformAdapter,
    report_failure: Callable[[str], None],
    log: logging.Logger | None = None,
) -> RunResult | None:
    """Run the check; hand fatal errors to ``report_failure`` and return None."""
    logger = log or logging.getLogger("ticket_check.runner")
    try:
        return run_ticket_check(context, config, adapter, log=logger)
    except TicketCheckError as e:
        logger.error("PR #%s: ticket check failed: %s", context.number, e)
        report_failure(str(e))
        return None
