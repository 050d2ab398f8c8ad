#!/usr/bin/env python3
"""
Slack message formatting for the Issue Checker.

Messages use Slack mrkdwn: `*bold*`, `<url|text>` links and fenced blocks.
"""

from datetime import timezone
from typing import Optional, Sequence

from .models import Issue

NO_ASSIGNEE_TITLE = ":thinking_face:Issues no one assigned."
STALE_OPEN_TITLE = ":tired_face:Issues have not been solved more than {days} days."
RECENTLY_CLOSED_TITLE = ":+1:Issues have been closed within {days} days."


def _timestamp(value) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def escape(text: str) -> str:
    """Escape the characters Slack treats as markup control characters"""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _join(parts: Sequence[Optional[str]]) -> str:
    """Join the non-empty parts with newlines"""
    return "\n".join(part for part in parts if part)


def format_issue(issue: Issue, separator: str = " ") -> str:
    """Render one issue as a fenced block, omitting empty fields."""
    assignees = separator.join(f"@{assignee}" for assignee in issue.assignees)
    labels = separator.join(issue.labels)
    return _join([
        "```",
        f"<{issue.url}|{escape(issue.title)}>",
        f"Author: @{issue.author}" if issue.author else None,
        f"Assignees: {assignees}" if assignees else None,
        f"Labels: {labels}" if labels else None,
        f"CreatedAt: {_timestamp(issue.created_at)}",
        "```",
    ])


def format_message(
    title: str,
    issues: Sequence[Issue],
    max_display: int,
    separator: str = " ",
) -> str:
    """Render a report section with at most `max_display` issue blocks."""
    return _join([
        f"*{title}*",
        f"*Total Count: {len(issues)}*",
        f"Display details up to {max_display}." if len(issues) > max_display else None,
        "\n".join(format_issue(issue, separator) for issue in issues[:max_display]),
    ])


def format_header(owner: str, repo: str, total_open: int) -> str:
    repository = f"{owner}/{repo}"
    return "\n".join([
        "*GitHub issue report.*\n",
        f"*Target repository:* <https://github.com/{repository}|{repository}>",
        f"*Total open issue: <https://github.com/{repository}/issues?q=is%3Aopen+is%3Aissue|{total_open}>*",
    ])
