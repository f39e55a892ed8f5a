"""Build a PullRequestContext from a pull_request event payload.

The same payload shape arrives as a webhook body and as the file GitHub
Actions points GITHUB_EVENT_PATH at.
"""

import json
from pathlib import Path
from typing import Any, Dict

from ticket_check.exceptions import EventError
from ticket_check.models import PullRequestContext


def _owner_and_repo(payload: Dict[str, Any], repository: str | None) -> tuple[str, str]:
    repo_payload = payload.get("repository") or {}
    owner = (repo_payload.get("owner") or {}).get("login") or ""
    name = repo_payload.get("name") or ""
    if owner and name:
        return owner, name
    full_name = repo_payload.get("full_name") or repository or ""
    if "/" not in full_name:
        raise EventError("Cannot determine repository (no repository in payload, GITHUB_REPOSITORY unset)")
    owner, _, name = full_name.partition("/")
    return owner, name


def context_from_event(payload: Dict[str, Any], repository: str | None = None) -> PullRequestContext:
    """Snapshot the pull request in ``payload``.

    ``repository`` ("owner/name") is used when the payload has no repository
    object. Raises EventError if the payload has no pull request.
    """
    pull = payload.get("pull_request")
    if not pull or pull.get("number") is None:
        raise EventError("Event payload has no pull_request; run this on pull_request events")
    owner, name = _owner_and_repo(payload, repository)
    user = pull.get("user") or {}
    head = pull.get("head") or {}
    return PullRequestContext(
        owner=owner,
        repo=name,
        number=int(pull["number"]),
        title=pull.get("title") or "",
        body=pull.get("body") or "",
        branch=head.get("ref") or "",
        author=user.get("login") or "",
        author_kind=user.get("type") or "User",
    )


def load_event(path: Path) -> Dict[str, Any]:
    """Read an event JSON file."""
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError as e:
        raise EventError(f"Event file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise EventError(f"Invalid event JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise EventError(f"Event file {path} does not contain a JSON object")
    return data
