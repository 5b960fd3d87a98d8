"""Test configuration and fixtures."""

from __future__ import annotations

import pytest

from failure_reporter.config import ReporterSettings
from failure_reporter.reporting.models import FailureReport, SystemInfo

_ENV_VARS = (
    "GITHUB_TOKEN",
    "GITHUB_BASE_URL",
    "FAILURE_REPORT_REPOSITORY",
    "FAILURE_REPORT_USER_AGENT",
    "FAILURE_REPORT_SINK",
    "FAILURE_REPORT_TIMEOUT_SECONDS",
    "FAILURE_REPORT_CORS_ORIGINS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's environment and `.env` out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def report() -> FailureReport:
    """Provide the canonical crash report."""
    return FailureReport(
        title="Crash",
        description="App crashed on load",
        system_info=SystemInfo(
            goose_version="1.2.3",
            os_version="Darwin 23.4.0",
            platform="macOS",
            architecture="arm64",
            provider_type=None,
            extension_count=2,
        ),
        recent_errors=["err1", "err2"],
        timestamp="2024-01-01T00:00:00Z",
    )


@pytest.fixture
def report_payload() -> dict[str, object]:
    """Provide the canonical crash report as sent on the wire."""
    return {
        "title": "Crash",
        "description": "App crashed on load",
        "systemInfo": {
            "gooseVersion": "1.2.3",
            "osVersion": "Darwin 23.4.0",
            "platform": "macOS",
            "architecture": "arm64",
            "extensionCount": 2,
        },
        "recentErrors": ["err1", "err2"],
        "timestamp": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def github_settings() -> ReporterSettings:
    """Provide settings with a GitHub token configured."""
    return ReporterSettings(
        github_token="test-token",
        github_repository="test-owner/test-repo",
    )
