"""Minimal webhook HTTP server for GitHub events.

Serves a health check and the webhook path. Requests are handled one at a
time.
"""

import hashlib
import hmac
import json
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import parse_qs

from ticket_check.config import AppConfig

LOG = logging.getLogger("ticket_check.webhook")


def verify_signature(secret: str, body: bytes, signature_header: str | None) -> bool:
    """Check X-Hub-Signature-256; always true when no secret is configured."""
    if not secret:
        return True
    if not signature_header or not signature_header.startswith("sha256="):
        return False
    expected = "sha256=" + hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature_header)


def parse_webhook_body(body: bytes, content_type: str = "") -> dict:
    """Parse webhook body as a JSON object.

    Supports raw JSON and application/x-www-form-urlencoded (payload=...).
    Raises ValueError on bad UTF-8, bad JSON or a non-object payload.
    """
    if not body:
        return {}
    if "application/x-www-form-urlencoded" in content_type:
        parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
        raw = (parsed.get("payload") or [None])[0]
        if raw is None:
            return {}
        payload = json.loads(raw)
    else:
        payload = json.loads(body.decode("utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


class WebhookHandler(BaseHTTPRequestHandler):
    """Handle GET /health and POST on the configured webhook path."""

    config: AppConfig

    def do_GET(self) -> None:
        if self.path == "/health" or self.path == "/":
            self._send_json(200, {"status": "ok", "service": "ticket-check"})
            return
        self.send_response(404)
        self.end_headers()

    def do_POST(self) -> None:
        if self.path == self.config.github.webhook_path:
            self._handle_github_webhook()
            return
        self.send_response(404)
        self.end_headers()

    def _send_json(self, status: int, data: dict) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def _handle_github_webhook(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""
        if not verify_signature(self.config.webhook_secret_resolved, body, self.headers.get("X-Hub-Signature-256")):
            LOG.warning("Rejected webhook with bad signature")
            self._send_json(401, {"error": "invalid signature"})
            return
        try:
            payload = parse_webhook_body(body, self.headers.get("Content-Type", ""))
        except ValueError as e:
            LOG.warning("Invalid webhook body (%s bytes): %s", len(body), e)
            self._send_json(400, {"error": "invalid payload"})
            return
        event = self.headers.get("X-GitHub-Event", "")
        LOG.info("Webhook event: %s (action: %s)", event, payload.get("action"))
        from ticket_check.webhook.handlers import handle_github_event

        handle_github_event(self.config, event, payload)
        self._send_json(200, {"received": True})

    def log_message(self, format: str, *args: Any) -> None:
        LOG.debug(format, *args)


def run_webhook_server(config: AppConfig) -> None:
    """Run HTTP server for webhooks and health check."""
    host = config.webhook.host
    port = config.webhook.port
    WebhookHandler.config = config
    server = HTTPServer((host, port), WebhookHandler)
    LOG.info("Webhook server listening on %s:%s", host, port)
    server.serve_forever()
