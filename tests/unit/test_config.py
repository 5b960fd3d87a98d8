"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from failure_reporter.config import ReporterSettings


def test_settings_defaults() -> None:
    settings = ReporterSettings()

    assert settings.github_token is None
    assert settings.github_base_url == "https://api.github.com"
    assert settings.github_repository == "block/goose"
    assert settings.user_agent == "goose-app"
    assert settings.sink == "github"
    assert settings.request_timeout_seconds is None
    assert settings.log_level == "INFO"


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "GITHUB_TOKEN=test-token",
                "FAILURE_REPORT_SINK=log",
                "LOG_LEVEL=DEBUG",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = ReporterSettings()

    assert settings.github_token == "test-token"
    assert settings.sink == "log"
    assert settings.log_level == "DEBUG"


def test_blank_token_is_treated_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "   ")

    assert ReporterSettings().github_token is None


def test_unknown_sink_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FAILURE_REPORT_SINK", "carrier-pigeon")

    with pytest.raises(ValidationError):
        ReporterSettings()


def test_parsed_cors_origins_strips_blanks() -> None:
    settings = ReporterSettings(cors_origins=" http://a.test , ,http://b.test")

    assert settings.parsed_cors_origins() == ["http://a.test", "http://b.test"]


def test_with_current_token_rereads_only_the_token(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = ReporterSettings(sink="log", github_repository="acme/widgets")
    monkeypatch.setenv("GITHUB_TOKEN", "fresh-token")
    monkeypatch.setenv("FAILURE_REPORT_SINK", "nope")
    monkeypatch.setenv("FAILURE_REPORT_REPOSITORY", "other/repo")

    current = settings.with_current_token()

    assert current.github_token == "fresh-token"
    assert current.sink == "log"
    assert current.github_repository == "acme/widgets"
    assert settings.github_token is None


def test_with_current_token_keeps_startup_token_when_none_is_configured() -> None:
    settings = ReporterSettings(github_token="startup-token")

    assert settings.with_current_token().github_token == "startup-token"
