"""GitHub integration."""

from failure_reporter.github.client import CreatedIssue, GitHubApiError, GitHubIssueClient

__all__ = ["CreatedIssue", "GitHubApiError", "GitHubIssueClient"]
