"""Webhook server and handlers for GitHub pull request events."""

from ticket_check.webhook.handlers import handle_github_event
from ticket_check.webhook.server import run_webhook_server

__all__ = ["handle_github_event", "run_webhook_server"]
