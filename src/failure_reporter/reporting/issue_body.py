"""Rendering of failure reports into GitHub issue content.

Rendering is pure: the same report always produces byte-identical output, and
every valid report renders without further checks.
"""

from __future__ import annotations

from failure_reporter.reporting.models import FailureReport

ISSUE_TITLE_PREFIX = "[FAILURE REPORT] "

FAILURE_REPORT_LABELS: tuple[str, ...] = ("bug", "needs-triage", "failure-report")

UNKNOWN_PROVIDER = "Unknown"

_ISSUE_BODY_TEMPLATE = """**Describe the bug**

{description}

**Please provide following information:**
- **OS & Arch:** {platform} {architecture}
- **Interface:** UI (Desktop App)
- **Version:** {version}
- **Provider & Model:** {provider}
- **Extensions:** {extension_count} installed
- **OS Version:** {os_version}

**Recent Errors/Logs:**
```
{recent_errors}
```

**Additional context**
- **Timestamp:** {timestamp}
- **Reported via:** Goose Desktop App automated failure reporting

---
*This issue was automatically created via the "Report a Failure" feature.*"""


def render_issue_title(title: str) -> str:
    return f"{ISSUE_TITLE_PREFIX}{title}"


def render_issue_body(report: FailureReport) -> str:
    """Render the Markdown issue body for a report.

    Recent errors are newline-joined in their original order inside a fenced
    block. A missing provider renders as ``Unknown``.
    """

    info = report.system_info
    return _ISSUE_BODY_TEMPLATE.format(
        description=report.description,
        platform=info.platform,
        architecture=info.architecture,
        version=info.goose_version,
        provider=info.provider_type if info.provider_type is not None else UNKNOWN_PROVIDER,
        extension_count=info.extension_count,
        os_version=info.os_version,
        recent_errors="\n".join(report.recent_errors),
        timestamp=report.timestamp,
    )
