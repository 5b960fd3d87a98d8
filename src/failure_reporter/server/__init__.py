"""FastAPI server adapter for failure-reporter.

Design intent:
- Keep the reporting flow in `failure_reporter.reporting.*`
- Keep server-specific concerns (routing, CORS, dependency wiring) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from failure_reporter.server.app import create_app
