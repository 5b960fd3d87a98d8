"""Failure Reporter.

Accepts failure reports from the Goose desktop client and:
- files them as GitHub issues
- falls back to a structured local log record when that is not possible
"""

__version__ = "0.1.0"

from failure_reporter.config import ReporterSettings

__all__ = ["__version__", "ReporterSettings"]
