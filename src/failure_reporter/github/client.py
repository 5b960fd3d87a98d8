"""GitHub REST client for filing failure report issues.

This intentionally wraps a single `requests.Session` to keep GitHub calls out of
the reporting flow and make tests easy (inject a mocked session).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreatedIssue:
    """Minimal issue metadata returned from GitHub."""

    number: int | None
    html_url: str


class GitHubApiError(Exception):
    """Raised when GitHub rejects a request or answers with an unusable payload."""

    def __init__(self, message: str, *, status_code: int | None = None, response_text: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is not None:
            base = f"{base} (HTTP {self.status_code})"
        if self.response_text:
            base = f"{base}: {self.response_text}"
        return base


class GitHubIssueClient:
    """Small wrapper around the GitHub issues endpoint of one repository."""

    def __init__(
        self,
        *,
        token: str,
        repository: str,
        base_url: str = "https://api.github.com",
        user_agent: str = "goose-app",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required")
        if not repository.strip():
            raise ValueError("GitHub repository is required")

        self._repository_name = repository.strip()
        self._rest_base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        # Sent per request so an injected session never keeps the token.
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": user_agent,
        }

    @property
    def repository(self) -> str:
        """Return the configured repository name ("owner/repo")."""

        return self._repository_name

    @property
    def issues_url(self) -> str:
        return f"{self._rest_base_url}/repos/{self._repository_name}/issues"

    def create_issue(self, *, title: str, body: str, labels: list[str]) -> CreatedIssue:
        """Create an issue and return its canonical web URL.

        Raises:
            GitHubApiError: GitHub answered with a non-success status, or the
                created issue carries no ``html_url``.
            requests.RequestException: The request could not be completed.
            ValueError: A success response whose body is not JSON.
        """

        payload = {"title": title, "body": body, "labels": labels}
        logger.info("Creating issue", extra={"repo": self._repository_name, "title": title})

        resp = self._session.post(
            self.issues_url, json=payload, headers=self._headers, timeout=self._timeout
        )
        if not resp.ok:
            raise GitHubApiError(
                "GitHub API error",
                status_code=resp.status_code,
                response_text=resp.text,
            )

        data: dict[str, Any] = resp.json()
        html_url = data.get("html_url") if isinstance(data, dict) else None
        if not isinstance(html_url, str) or not html_url.strip():
            raise GitHubApiError("GitHub response missing html_url", status_code=resp.status_code)

        number = data.get("number")
        created = CreatedIssue(number=number if isinstance(number, int) else None, html_url=html_url)
        logger.info("Issue created", extra={"issue_number": created.number, "url": created.html_url})
        return created

    def close(self) -> None:
        self._session.close()
