#!/usr/bin/env python3
"""
GitHub Issue Checker Package

A scheduled job that reports unassigned, stale and recently closed
GitHub issues of one repository to a Slack channel.
"""

__version__ = "1.0.0"

from .config import Config
from .github_client import GitHubClient
from .models import (
    Issue,
    IssuePage,
    IssueState,
    OrderBy,
    OrderDirection,
    OrderField,
    QueryArgs,
)
from .reporter import IssueReporter
from .slack_notifier import SlackNotifier

# Define what's available for import
__all__ = [
    # Models
    "IssueState",
    "OrderField",
    "OrderDirection",
    "OrderBy",
    "QueryArgs",
    "Issue",
    "IssuePage",

    # Core components
    "Config",
    "GitHubClient",
    "SlackNotifier",
    "IssueReporter",
]
