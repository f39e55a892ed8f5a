"""Configuration loading from YAML, GitHub Actions inputs and environment.

Policy options are read from ``INPUT_<NAME>`` variables (how GitHub Actions
passes ``with:`` inputs), from the ``ticket`` section of a YAML file, or from
keyword arguments. All policy options stay raw strings: flag coercion lives
in ticket_check.policy.flags.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticket_check.exceptions import ConfigError
from ticket_check.policy.flags import is_enabled, parse_user_list

DEFAULT_TITLE_FORMAT = "%prefix%%id%: %title%"


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = os.environ.get(env_key)
    if value:
        return value.strip()
    file_path = os.environ.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


def _option(name: str, *aliases: str, **kwargs: Any) -> Any:
    """Field readable as camelCase input name, its INPUT_ env var, or any alias."""
    names: list[str] = []
    for n in (name, *aliases):
        names.extend([n, f"INPUT_{n.upper()}"])
    return Field(validation_alias=AliasChoices(*names), **kwargs)


class TicketConfig(BaseSettings):
    """Ticket policy: patterns, templates, exemptions and comment flags."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    title_pattern: str = _option(
        "titlePattern",
        "titleRegex",
        default=r"^[A-Z][A-Z0-9]*-(?<ticketNumber>\d+)",
        description="Pattern a valid title must match",
    )
    title_pattern_flags: str = _option("titlePatternFlags", "titleRegexFlags", default="i")
    branch_pattern: str = _option(
        "branchPattern",
        "branchRegex",
        default=r"^[A-Z][A-Z0-9]*-(?<ticketNumber>\d+)",
        description="Pattern applied to the head branch name",
    )
    branch_pattern_flags: str = _option("branchPatternFlags", "branchRegexFlags", default="i")
    body_pattern: str = _option(
        "bodyPattern",
        "bodyRegex",
        default=r"[A-Z][A-Z0-9]*-(?<ticketNumber>\d+)",
        description="Pattern applied to the PR body",
    )
    body_pattern_flags: str = _option("bodyPatternFlags", "bodyRegexFlags", default="im")
    body_url_pattern: str = _option(
        "bodyURLPattern",
        "bodyURLRegex",
        default="",
        description="Pattern for a ticket URL in the PR body (empty disables)",
    )
    body_url_pattern_flags: str = _option("bodyURLPatternFlags", "bodyURLRegexFlags", default="im")
    title_format: str = _option(
        "titleFormat",
        default=DEFAULT_TITLE_FORMAT,
        description="Template with %prefix%, %id% and %title%",
    )
    ticket_prefix: str = _option("ticketPrefix", description="Prefix joined to the ticket number, e.g. ABC-")
    exempt_users: str = _option("exemptUsers", default="", description="Comma or newline separated logins")
    comment_on_title_update: str = _option("commentOnTitleUpdate", default="false")
    comment_with_ticket_link: str = _option("commentWithTicketLink", default="false")
    ticket_link: str = _option("ticketLink", default="", description="URL template with %ticketNumber%")

    @field_validator("exempt_users", mode="before")
    @classmethod
    def _join_user_list(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set)):
            return ",".join(str(v) for v in value)
        return value

    @field_validator("title_format")
    @classmethod
    def _default_empty_format(cls, value: str) -> str:
        # Actions passes "" for inputs the workflow leaves out
        return value or DEFAULT_TITLE_FORMAT

    @property
    def exempt_user_set(self) -> frozenset[str]:
        return parse_user_list(self.exempt_users)

    @property
    def explain_title_update(self) -> bool:
        return is_enabled(self.comment_on_title_update)

    @property
    def post_ticket_link(self) -> bool:
        return is_enabled(self.comment_with_ticket_link)


class GitHubConfig(BaseSettings):
    """GitHub API and webhook settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or Actions token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    webhook_path: str = Field(default="/webhook/github", description="Webhook URL path")


class WebhookConfig(BaseSettings):
    """Webhook server settings."""

    model_config = SettingsConfigDict(env_prefix="WEBHOOK_", extra="ignore")

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    secret: str = Field(default="", description="Secret for X-Hub-Signature-256 verification")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    ticket: TicketConfig
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, Actions input, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("INPUT_TOKEN", "INPUT_TOKEN_FILE") or _read_secret(
            "GITHUB_TOKEN", "GITHUB_TOKEN_FILE"
        )

    @property
    def webhook_secret_resolved(self) -> str:
        """Resolve webhook secret from config, env or Docker secret file."""
        s = self.webhook.secret
        if s and not s.startswith("${"):
            return s
        return _read_secret("WEBHOOK_SECRET", "WEBHOOK_SECRET_FILE") or ""


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return os.environ.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return os.environ.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file is not an error: everything then comes from INPUT_* and
    the other env sections. Invalid values raise ConfigError.
    """
    raw: dict[str, Any] = {}
    if config_path is not None and config_path.is_file():
        try:
            raw = yaml.safe_load(config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse {config_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{config_path}: top level must be a mapping")
        raw = _substitute_env(raw)

    try:
        return AppConfig(
            ticket=TicketConfig(**(raw.get("ticket") or {})),
            github=GitHubConfig(**(raw.get("github") or {})),
            webhook=WebhookConfig(**(raw.get("webhook") or {})),
            logging=LoggingConfig(**(raw.get("logging") or {})),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
