"""FastAPI app factory.

The report endpoint is a thin wrapper over :class:`ReportSubmitter`. Payload
validation happens here (FastAPI answers 422 before the submitter runs); once a
report is accepted the endpoint always answers 200 and carries the real outcome
in the body.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from failure_reporter import __version__
from failure_reporter.config import ReporterSettings
from failure_reporter.reporting.models import FailureReport, IssueSubmissionResult
from failure_reporter.reporting.sinks import create_sink
from failure_reporter.reporting.submitter import ReportSubmitter

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> ReporterSettings:
    # Validated once in create_app; only the GitHub token is re-read per report.
    settings: ReporterSettings = request.app.state.settings
    return settings.with_current_token()


def get_submitter(
    settings: Annotated[ReporterSettings, Depends(get_settings)],
) -> ReportSubmitter:
    return ReportSubmitter(create_sink(settings))


def create_app(settings: ReporterSettings | None = None) -> FastAPI:
    settings = settings or ReporterSettings()

    app = FastAPI(
        title="Failure Reporter",
        version=__version__,
        description="Files desktop failure reports as GitHub issues, with local log fallback.",
    )

    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/report-failure", response_model=IssueSubmissionResult)
    def report_failure(
        report: FailureReport,
        submitter: Annotated[ReportSubmitter, Depends(get_submitter)],
    ) -> IssueSubmissionResult:
        return submitter.submit(report)

    return app
