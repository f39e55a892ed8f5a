"""Ticket check entry point.

Two modes: run (GitHub Actions, one pull request from the event file) and
serve (webhook server). Usage: ticket-check run | ticket-check serve.
"""

import argparse
import logging
import sys
from pathlib import Path

from ticket_check.config import load_config
from ticket_check.exceptions import ConfigError
from ticket_check.logging import TicketCheckLogging
from ticket_check.policy import TicketPatterns


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI with optional subcommand (run | serve)."""
    argv = argv if argv is not None else sys.argv[1:]
    sub = "run"
    rest = list(argv)
    if argv and not argv[0].startswith("-"):
        if argv[0] in ("run", "serve"):
            sub = argv[0]
            rest = argv[1:]

    parser = argparse.ArgumentParser(
        prog="ticket-check",
        description="Ticket check - keep PR titles tied to a tracking ticket",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file (optional; INPUT_* env is used otherwise)",
    )
    parser.add_argument(
        "--event",
        "-e",
        type=Path,
        default=None,
        help="Path to pull_request event JSON (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    parsed = parser.parse_args(rest)
    parsed.subcommand = sub
    return parsed


def main(argv: list[str] | None = None) -> int:
    """Entry point: dispatch to run or serve."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        TicketCheckLogging(config.logging).setup()
        if args.check:
            TicketPatterns.from_config(config.ticket)
    except ConfigError as e:
        from ticket_check.actions import set_failed

        logging.getLogger("ticket_check").error("%s", e)
        set_failed(str(e))
        return 1

    if args.check:
        print("Config OK:", config.ticket.title_format, config.ticket.ticket_prefix)
        return 0

    if args.subcommand == "serve":
        from ticket_check.webhook.server import run_webhook_server

        try:
            run_webhook_server(config)
        except KeyboardInterrupt:
            return 0
        except Exception as e:
            logging.getLogger("ticket_check.webhook").exception("Fatal error: %s", e)
            return 1
        return 0

    from ticket_check.actions import run_action

    return run_action(config, event_path=args.event)


if __name__ == "__main__":
    sys.exit(main())
