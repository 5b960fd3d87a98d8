"""CLI entrypoint for the failure reporter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from failure_reporter import __version__
from failure_reporter.config import ReporterSettings
from failure_reporter.logging import configure_logging
from failure_reporter.reporting.models import FailureReport
from failure_reporter.reporting.sinks import create_sink
from failure_reporter.reporting.submitter import ReportSubmitter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="failure-reporter",
        description="File desktop failure reports as GitHub issues, with local log fallback",
    )
    parser.add_argument("--version", action="version", version=f"failure-reporter {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve.add_argument("--port", type=int, default=8000, help="Port to listen on")

    submit = subparsers.add_parser(
        "submit",
        help="Submit a failure report from a JSON file (camelCase, as sent by the desktop client)",
    )
    submit.add_argument("report", type=Path, help="Path to the report JSON file")

    return parser


def _load_report(path: Path) -> FailureReport:
    return FailureReport.model_validate_json(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ReporterSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    if args.command == "serve":
        import uvicorn

        from failure_reporter.server.app import create_app

        logger.info("Starting server", extra={"host": args.host, "port": args.port})
        uvicorn.run(create_app(settings), host=args.host, port=args.port, log_config=None)
        return 0

    if args.command == "submit":
        try:
            report = _load_report(args.report)
        except OSError as e:
            print(f"Cannot read report: {e}", file=sys.stderr)
            return 2
        except ValidationError as e:
            print("Invalid failure report:", file=sys.stderr)
            print(e, file=sys.stderr)
            return 2

        result = ReportSubmitter(create_sink(settings)).submit(report)
        print(json.dumps(result.model_dump(mode="json"), indent=2))
        return 0 if result.success else 1

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
