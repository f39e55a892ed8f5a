"""GitHub API adapter."""

from typing import Any, Dict, List

import requests

from ticket_check.adapters.base import GitPlatformAdapter
from ticket_check.exceptions import GitPlatformError
from ticket_check.models import Review

PER_PAGE = 100


def _review_from_api(data: Dict[str, Any]) -> Review:
    user = data.get("user") or {}
    return Review(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        state=data.get("state") or "COMMENTED",
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub REST API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github+json"
        self._session.headers["X-GitHub-Api-Version"] = "2022-11-28"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}", status_code=resp.status_code)
        return resp

    def update_pr_title(self, owner: str, repo: str, pr_number: int, title: str) -> None:
        self._request("PATCH", f"/repos/{owner}/{repo}/pulls/{pr_number}", json={"title": title})

    def list_pr_reviews(self, owner: str, repo: str, pr_number: int) -> List[Review]:
        reviews: List[Review] = []
        page = 1
        while True:
            resp = self._request(
                "GET",
                f"/repos/{owner}/{repo}/pulls/{pr_number}/reviews",
                params={"per_page": PER_PAGE, "page": page},
            )
            data = resp.json() or []
            reviews.extend(_review_from_api(d) for d in data)
            if len(data) < PER_PAGE:
                break
            page += 1
        return reviews

    def create_pr_review(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        body: str,
        event: str = "COMMENT",
    ) -> Review:
        resp = self._request(
            "POST",
            f"/repos/{owner}/{repo}/pulls/{pr_number}/reviews",
            json={"body": body, "event": event},
        )
        return _review_from_api(resp.json())
