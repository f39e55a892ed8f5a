"""Handle GitHub webhook events.

Only pull_request events whose title, body or branch may have changed are
checked; everything else is ignored.
"""

import logging
from typing import Any, Dict

from ticket_check.adapters.base import GitPlatformAdapter
from ticket_check.adapters.github import GitHubAdapter
from ticket_check.config import AppConfig
from ticket_check.event import context_from_event
from ticket_check.exceptions import EventError
from ticket_check.runner import RunResult, run_and_report

CHECKED_ACTIONS = frozenset({"opened", "edited", "reopened", "synchronize"})


def handle_github_event(
    config: AppConfig,
    event: str,
    payload: Dict[str, Any],
    adapter: GitPlatformAdapter | None = None,
    log: logging.Logger | None = None,
) -> RunResult | None:
    """Handle a GitHub webhook event.

    Supported events:
    - pull_request (action=opened, edited, reopened, synchronize): run the ticket check.

    Returns the run result, or None when the event was ignored or failed.
    """
    logger = log or logging.getLogger("ticket_check.webhook.handlers")

    if event != "pull_request":
        logger.debug("Ignoring %s event", event or "unknown")
        return None
    action = payload.get("action")
    if action not in CHECKED_ACTIONS:
        logger.debug("Ignoring pull_request action %s", action)
        return None

    try:
        context = context_from_event(payload)
    except EventError as e:
        logger.warning("Bad pull_request payload: %s", e)
        return None

    if adapter is None:
        token = config.github_token_resolved
        if not token:
            logger.warning("No GitHub token; cannot check PR #%s", context.number)
            return None
        adapter = GitHubAdapter(token=token, api_url=config.github.api_url)

    logger.info("Checking %s PR #%s (%s)", context.full_name, context.number, action)
    return run_and_report(context, config.ticket, adapter, logger.error, log=logger)
