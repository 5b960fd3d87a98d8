"""Configuration for the failure reporter.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The service is "local-first": it starts and accepts reports even if no GitHub
token is configured. A missing token only means reports fall back to local
logging.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SinkKind = Literal["github", "log"]


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ReporterSettings(BaseSettings):
    """Settings for the failure reporter service and CLI.

    Environment variables:
    - GITHUB_TOKEN                    (optional)
    - GITHUB_BASE_URL                 (optional)
    - FAILURE_REPORT_REPOSITORY       (optional)
    - FAILURE_REPORT_USER_AGENT       (optional)
    - FAILURE_REPORT_SINK             (optional)
    - FAILURE_REPORT_TIMEOUT_SECONDS  (optional)
    - FAILURE_REPORT_CORS_ORIGINS     (optional)
    - LOG_LEVEL                       (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `ReporterSettings(_env_file=path_to_env)`.
    """

    github_token: str | None = Field(
        default=None,
        validation_alias="GITHUB_TOKEN",
        description="GitHub token used to create issues. Reports are only logged when unset.",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )
    github_repository: str = Field(
        default="block/goose",
        validation_alias="FAILURE_REPORT_REPOSITORY",
        description="Repository receiving failure report issues, in the form 'owner/repo'",
    )
    user_agent: str = Field(
        default="goose-app",
        validation_alias="FAILURE_REPORT_USER_AGENT",
        description="Client identifier sent with every GitHub request",
    )

    sink: SinkKind = Field(
        default="github",
        validation_alias="FAILURE_REPORT_SINK",
        description=(
            "Where reports are delivered. 'github' files an issue and falls back to local "
            "logging on failure; 'log' never calls GitHub and only logs locally."
        ),
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias="FAILURE_REPORT_TIMEOUT_SECONDS",
        description="Timeout for the issue creation call (unset keeps the transport default)",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    # Dev-friendly CORS for the desktop client. Override via FAILURE_REPORT_CORS_ORIGINS=...
    cors_origins: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        validation_alias="FAILURE_REPORT_CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins.",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("github_token", mode="before")
    @classmethod
    def _blank_token_is_missing(cls, value: object) -> object:
        return _blank_to_none(value)

    def parsed_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def with_current_token(self) -> ReporterSettings:
        """Return these settings with the GitHub token as currently configured.

        Only the token is re-read; everything else stays as validated at
        startup. The startup token is kept when none is configured now.
        """

        current = GitHubCredential().github_token
        if current is None or current == self.github_token:
            return self
        return self.model_copy(update={"github_token": current})


class GitHubCredential(BaseSettings):
    """The GitHub token alone, re-read whenever a report arrives."""

    github_token: str | None = Field(default=None, validation_alias="GITHUB_TOKEN")

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    @field_validator("github_token", mode="before")
    @classmethod
    def _blank_token_is_missing(cls, value: object) -> object:
        return _blank_to_none(value)
