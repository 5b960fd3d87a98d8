"""Issue sinks: where a rendered failure report is delivered.

A sink never raises for delivery problems. It returns one of the outcome types
below, and the submitter decides what the caller sees.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

import requests

from failure_reporter.config import ReporterSettings
from failure_reporter.github.client import GitHubApiError, GitHubIssueClient

logger = logging.getLogger(__name__)

FailureReason = Literal["credential_missing", "transport"]


@dataclass(frozen=True, slots=True)
class Delivered:
    """The tracker accepted the issue and returned its URL."""

    issue_url: str


@dataclass(frozen=True, slots=True)
class DeliveryFailed:
    """Remote delivery was abandoned or failed."""

    reason: FailureReason
    detail: str


@dataclass(frozen=True, slots=True)
class NotAttempted:
    """The sink does not deliver remotely (log-only deployments)."""


DeliveryOutcome = Delivered | DeliveryFailed | NotAttempted


class IssueSink(ABC):
    """Destination for rendered failure reports."""

    @abstractmethod
    def deliver(self, *, title: str, body: str, labels: list[str]) -> DeliveryOutcome:
        """Deliver one rendered issue.

        Args:
            title: Issue title, already prefixed.
            body: Rendered Markdown body.
            labels: Labels to attach.

        Returns:
            The delivery outcome. Delivery problems are returned, not raised.
        """


class LocalLogSink(IssueSink):
    """Sink for deployments without tracker integration; reports are only logged."""

    def deliver(self, *, title: str, body: str, labels: list[str]) -> DeliveryOutcome:
        return NotAttempted()


class GitHubIssueSink(IssueSink):
    """Files reports as GitHub issues.

    The token is injected at construction; ``None`` means no credential is
    configured and delivery is abandoned before any network call.
    """

    def __init__(
        self,
        *,
        token: str | None,
        repository: str,
        base_url: str = "https://api.github.com",
        user_agent: str = "goose-app",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._token = token
        self._repository = repository
        self._base_url = base_url
        self._user_agent = user_agent
        self._timeout = timeout
        self._session = session

    def _client(self, token: str) -> GitHubIssueClient:
        return GitHubIssueClient(
            token=token,
            repository=self._repository,
            base_url=self._base_url,
            user_agent=self._user_agent,
            timeout=self._timeout,
            session=self._session,
        )

    def deliver(self, *, title: str, body: str, labels: list[str]) -> DeliveryOutcome:
        if not self._token:
            return DeliveryFailed(reason="credential_missing", detail="GITHUB_TOKEN not set")

        try:
            github = self._client(self._token)
        except ValueError as e:
            return DeliveryFailed(reason="transport", detail=str(e))

        try:
            created = github.create_issue(title=title, body=body, labels=labels)
        except (GitHubApiError, requests.RequestException, ValueError) as e:
            return DeliveryFailed(reason="transport", detail=str(e))
        finally:
            # An injected session belongs to the caller.
            if self._session is None:
                github.close()

        return Delivered(issue_url=created.html_url)


def create_sink(settings: ReporterSettings) -> IssueSink:
    """Create the issue sink selected by configuration.

    Raises:
        ValueError: If the sink kind is not supported.
    """

    logger.debug("Creating issue sink", extra={"sink": settings.sink})

    if settings.sink == "github":
        return GitHubIssueSink(
            token=settings.github_token,
            repository=settings.github_repository,
            base_url=settings.github_base_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout_seconds,
        )
    if settings.sink == "log":
        return LocalLogSink()
    raise ValueError(f"Unsupported issue sink: {settings.sink}")
