"""Pydantic models for failure reports and submission results.

Attributes are snake_case in Python; the JSON wire format is lowerCamelCase
(``gooseVersion``, ``recentErrors``, ``issueUrl``...). Either spelling is
accepted on input, and models serialise by alias.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SUBMITTED_MESSAGE = "Failure report submitted successfully"
MANUAL_REQUIRED_MESSAGE = "Failed to submit report automatically. Please report manually on GitHub."
LOGGED_LOCALLY_MESSAGE = "Failure report logged successfully"


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class SystemInfo(_WireModel):
    """Client environment captured alongside a report."""

    model_config = ConfigDict(frozen=True)

    goose_version: str
    os_version: str
    platform: str
    architecture: str
    provider_type: str | None = None
    extension_count: int = Field(ge=0, strict=True)


class FailureReport(_WireModel):
    """A failure report as submitted by the desktop client.

    ``timestamp`` is opaque: it is never parsed, only passed through.
    ``recent_errors`` is kept in the order the client sent it.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    system_info: SystemInfo
    recent_errors: list[str]
    timestamp: str

    def description_summary(self, limit: int = 100) -> str:
        return self.description[:limit]


class IssueSubmissionResult(_WireModel):
    """Outcome returned to the client.

    ``success`` is the real outcome; the endpoint never signals failure through
    the HTTP status.
    """

    success: bool
    message: str
    issue_url: str | None = None

    @classmethod
    def submitted(cls, issue_url: str) -> IssueSubmissionResult:
        return cls(success=True, message=SUBMITTED_MESSAGE, issue_url=issue_url)

    @classmethod
    def manual_required(cls) -> IssueSubmissionResult:
        return cls(success=False, message=MANUAL_REQUIRED_MESSAGE)

    @classmethod
    def logged_locally(cls) -> IssueSubmissionResult:
        return cls(success=True, message=LOGGED_LOCALLY_MESSAGE)
