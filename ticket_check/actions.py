"""GitHub Actions glue: workflow commands and the single-run entry."""

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from ticket_check.adapters.github import GitHubAdapter
from ticket_check.config import AppConfig
from ticket_check.event import context_from_event, load_event
from ticket_check.exceptions import ConfigError, EventError, TicketCheckError
from ticket_check.policy import is_exempt
from ticket_check.runner import RunResult, run_and_report

LOG = logging.getLogger("ticket_check.actions")


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Emit an ::error:: workflow command so the job shows the failure."""
    out = stream or sys.stdout
    out.write(f"::error::{_escape_data(message)}\n")
    out.flush()


def run_action(config: AppConfig, event_path: Path | None = None) -> int:
    """Run once for the pull request in the Actions event; return exit code."""
    try:
        if event_path is None:
            raw = os.environ.get("GITHUB_EVENT_PATH")
            if not raw:
                raise EventError("GITHUB_EVENT_PATH is not set; pass --event")
            event_path = Path(raw)
        context = context_from_event(load_event(event_path), repository=os.environ.get("GITHUB_REPOSITORY"))
        if is_exempt(context.author, config.ticket.exempt_user_set):
            LOG.info("PR #%s: author %s is exempt, skipping", context.number, context.author)
            return 0
        token = config.github_token_resolved
        if not token:
            raise ConfigError("No GitHub token: set the token input, GITHUB_TOKEN or GITHUB_TOKEN_FILE")
    except TicketCheckError as e:
        LOG.error("%s", e)
        set_failed(str(e))
        return 1

    adapter = GitHubAdapter(token=token, api_url=config.github.api_url)
    result: RunResult | None = run_and_report(context, config.ticket, adapter, set_failed)
    if result is None:
        return 1
    LOG.info("PR #%s: %s", context.number, result.decision.outcome.value)
    return 0
