"""Failure report submission.

The flow is the same for every deployment: render the issue, hand it to the
configured sink, log the report locally when it did not reach the tracker, and
compose the result. ``submit`` never raises.
"""

from __future__ import annotations

import logging

from failure_reporter.reporting.issue_body import (
    FAILURE_REPORT_LABELS,
    render_issue_body,
    render_issue_title,
)
from failure_reporter.reporting.models import FailureReport, IssueSubmissionResult
from failure_reporter.reporting.sinks import (
    Delivered,
    DeliveryFailed,
    DeliveryOutcome,
    IssueSink,
    NotAttempted,
)

logger = logging.getLogger(__name__)


def log_failure_report_locally(report: FailureReport) -> None:
    """Emit the single fallback record for a report that needs manual processing."""

    info = report.system_info
    system = f"{info.platform}/{info.architecture}/{info.goose_version}"
    logger.error(
        "FAILURE REPORT (Manual Processing Required): "
        "Title: %s, Description: %s, System: %s, Timestamp: %s",
        report.title,
        report.description,
        system,
        report.timestamp,
        extra={
            "title": report.title,
            "description": report.description,
            "system": system,
            "timestamp": report.timestamp,
            "manual_processing_required": True,
        },
    )


class ReportSubmitter:
    """Submits failure reports through an :class:`IssueSink`."""

    def __init__(self, sink: IssueSink) -> None:
        self._sink = sink

    @property
    def sink(self) -> IssueSink:
        return self._sink

    def _attempt(self, report: FailureReport) -> DeliveryOutcome:
        try:
            return self._sink.deliver(
                title=render_issue_title(report.title),
                body=render_issue_body(report),
                labels=list(FAILURE_REPORT_LABELS),
            )
        except Exception as e:  # noqa: BLE001
            logger.exception("Issue sink raised unexpectedly")
            return DeliveryFailed(reason="transport", detail=str(e))

    def submit(self, report: FailureReport) -> IssueSubmissionResult:
        logger.info(
            "Received failure report",
            extra={"title": report.title, "summary": report.description_summary()},
        )
        logger.debug(
            "System info",
            extra={"system_info": report.system_info.model_dump(mode="json")},
        )

        outcome = self._attempt(report)

        if isinstance(outcome, Delivered):
            logger.info("Successfully created GitHub issue", extra={"url": outcome.issue_url})
            return IssueSubmissionResult.submitted(outcome.issue_url)

        if isinstance(outcome, NotAttempted):
            log_failure_report_locally(report)
            return IssueSubmissionResult.logged_locally()

        logger.error(
            "Failed to create GitHub issue",
            extra={"reason": outcome.reason, "detail": outcome.detail},
        )
        log_failure_report_locally(report)
        return IssueSubmissionResult.manual_required()
