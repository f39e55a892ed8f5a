"""Tests for extract() (MatchResult only with a captured ticketNumber)."""

import pytest
from pydantic import ValidationError

from ticket_check.models import MatchResult, SourceKind
from ticket_check.policy import compile_pattern, extract


def test_extract_returns_match_result() -> None:
    pattern = compile_pattern(r"^(TEST)-(?<ticketNumber>\d+)", "gi", "branchPattern")
    result = extract("TEST-123-feature", pattern, SourceKind.BRANCH)
    assert result == MatchResult(source=SourceKind.BRANCH, ticket_number="123")


def test_extract_no_match() -> None:
    pattern = compile_pattern(r"^(TEST)-(?<ticketNumber>\d+)", "", "branchPattern")
    assert extract("feature-branch", pattern, SourceKind.BRANCH) is None


def test_extract_without_named_group_is_none() -> None:
    pattern = compile_pattern(r"^(TEST)-(\d+)", "", "titlePattern")
    assert extract("TEST-789: My PR", pattern, SourceKind.TITLE) is None


def test_extract_group_not_participating_is_none() -> None:
    pattern = compile_pattern(r"^(?:TEST-(?<ticketNumber>\d+)|WIP)", "", "titlePattern")
    assert extract("WIP: stuff", pattern, SourceKind.TITLE) is None
    assert extract("TEST-4: stuff", pattern, SourceKind.TITLE).ticket_number == "4"


def test_extract_empty_capture_is_none() -> None:
    pattern = compile_pattern(r"^TEST-(?<ticketNumber>\d*)", "", "titlePattern")
    assert extract("TEST-: nothing", pattern, SourceKind.TITLE) is None


def test_extract_disabled_pattern() -> None:
    pattern = compile_pattern("", "", "bodyURLPattern")
    assert extract("https://x/TEST-1", pattern, SourceKind.BODY_URL) is None


def test_extract_handles_empty_text() -> None:
    pattern = compile_pattern(r"(?<ticketNumber>\d+)", "", "bodyPattern")
    assert extract("", pattern, SourceKind.BODY) is None


def test_extract_first_match_wins() -> None:
    pattern = compile_pattern(r"TEST-(?<ticketNumber>\d+)", "g", "bodyPattern")
    assert extract("TEST-1 then TEST-2", pattern, SourceKind.BODY).ticket_number == "1"


def test_match_result_requires_ticket_number() -> None:
    with pytest.raises(ValidationError):
        MatchResult(source=SourceKind.TITLE, ticket_number="")


def test_extract_ignores_non_ascii_digits() -> None:
    pattern = compile_pattern(r"(TEST)-(?<ticketNumber>\d+)", "gim", "bodyPattern")
    assert extract("Fixes TEST-١٢٣", pattern, SourceKind.BODY) is None
