"""Reporting package initialization."""

from failure_reporter.reporting.models import FailureReport, IssueSubmissionResult, SystemInfo
from failure_reporter.reporting.sinks import (
    GitHubIssueSink,
    IssueSink,
    LocalLogSink,
    create_sink,
)
from failure_reporter.reporting.submitter import ReportSubmitter

__all__ = [
    "FailureReport",
    "GitHubIssueSink",
    "IssueSink",
    "IssueSubmissionResult",
    "LocalLogSink",
    "ReportSubmitter",
    "SystemInfo",
    "create_sink",
]
