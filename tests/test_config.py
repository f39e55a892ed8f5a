"""Tests for configuration loading (inputs, YAML and env)."""

from pathlib import Path

import pytest

from ticket_check.config import DEFAULT_TITLE_FORMAT, TicketConfig, load_config
from ticket_check.exceptions import ConfigError


def test_actions_inputs_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """INPUT_<NAME> variables fill the policy."""
    monkeypatch.setenv("INPUT_TICKETPREFIX", "ABC-")
    monkeypatch.setenv("INPUT_TITLEPATTERN", r"^ABC-(?<ticketNumber>\d+)")
    monkeypatch.setenv("INPUT_COMMENTWITHTICKETLINK", "true")
    monkeypatch.setenv("INPUT_EXEMPTUSERS", "bot1,bot2")
    config = TicketConfig()
    assert config.ticket_prefix == "ABC-"
    assert config.title_pattern == r"^ABC-(?<ticketNumber>\d+)"
    assert config.post_ticket_link is True
    assert config.explain_title_update is False
    assert config.exempt_user_set == frozenset({"bot1", "bot2"})


def test_regex_input_names_are_aliases(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_TICKETPREFIX", "ABC-")
    monkeypatch.setenv("INPUT_BRANCHREGEX", r"^abc-(?<ticketNumber>\d+)")
    monkeypatch.setenv("INPUT_BRANCHREGEXFLAGS", "gi")
    config = TicketConfig()
    assert config.branch_pattern == r"^abc-(?<ticketNumber>\d+)"
    assert config.branch_pattern_flags == "gi"


def test_keyword_and_field_names() -> None:
    by_alias = TicketConfig(ticketPrefix="X-", bodyURLPattern="u")
    by_name = TicketConfig(ticket_prefix="X-", body_url_pattern="u")
    assert by_alias.body_url_pattern == by_name.body_url_pattern == "u"


def test_flags_stay_raw_strings() -> None:
    config = TicketConfig(ticketPrefix="X-", commentOnTitleUpdate="True", commentWithTicketLink="1")
    assert config.comment_on_title_update == "True"
    assert config.explain_title_update is False
    assert config.post_ticket_link is False


def test_empty_title_format_falls_back_to_default() -> None:
    assert TicketConfig(ticketPrefix="X-", titleFormat="").title_format == DEFAULT_TITLE_FORMAT


def test_exempt_users_list_from_yaml() -> None:
    config = TicketConfig(ticketPrefix="X-", exemptUsers=["a", "b"])
    assert config.exempt_user_set == frozenset({"a", "b"})


def test_load_config_from_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_TOKEN", "from-env")
    path = tmp_path / "config.yaml"
    path.write_text(
        "ticket:\n"
        "  ticketPrefix: JIRA-\n"
        "  titlePattern: '^JIRA-(?<ticketNumber>\\d+)'\n"
        "  exemptUsers: [renovate]\n"
        "github:\n"
        "  token: ${MY_TOKEN}\n"
        "webhook:\n"
        "  port: 9000\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(path)
    assert config.ticket.ticket_prefix == "JIRA-"
    assert config.ticket.exempt_user_set == frozenset({"renovate"})
    assert config.github_token_resolved == "from-env"
    assert config.webhook.port == 9000
    assert config.logging.level == "DEBUG"


def test_load_config_missing_file_uses_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_TICKETPREFIX", "ENV-")
    config = load_config(tmp_path / "absent.yaml")
    assert config.ticket.ticket_prefix == "ENV-"
    assert config.github.api_url == "https://api.github.com"


def test_load_config_without_prefix_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_load_config_bad_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("ticket: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_token_resolution_order(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("INPUT_TICKETPREFIX", "X-")
    secret = tmp_path / "token"
    secret.write_text("from-file\n")
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))
    assert load_config(None).github_token_resolved == "from-file"
    monkeypatch.setenv("INPUT_TOKEN", "from-input")
    assert load_config(None).github_token_resolved == "from-input"
