"""Shared fixtures for the issue checker tests"""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from issue_checker.config import Config
from issue_checker.models import Issue, IssueState

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_issue():
    """Factory for Issue snapshots created `age_days` before NOW"""
    def _make_issue(
        title="Fix bug",
        number=1,
        age_days=1,
        state=IssueState.OPEN,
        closed_days_ago=None,
        author="octocat",
        assignees=(),
        labels=(),
    ):
        return Issue(
            title=title,
            url=f"https://github.com/owner/repo/issues/{number}",
            state=state,
            created_at=NOW - timedelta(days=age_days),
            updated_at=NOW - timedelta(days=age_days),
            closed_at=NOW - timedelta(days=closed_days_ago) if closed_days_ago is not None else None,
            author=author,
            assignees=tuple(assignees),
            labels=tuple(labels),
        )
    return _make_issue


@pytest.fixture
def make_node():
    """Factory for raw GraphQL issue nodes"""
    def _make_node(number=1, assignees=(), labels=(), closed_at=None, state="OPEN", **overrides):
        node = {
            "title": f"Issue {number}",
            "url": f"https://github.com/owner/repo/issues/{number}",
            "state": state,
            "publishedAt": "2024-01-01T00:00:00Z",
            "lastEditedAt": None,
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-02T00:00:00Z",
            "closedAt": closed_at,
            "author": {"resourcePath": "/octocat"},
            "assignees": {"nodes": [{"resourcePath": f"/{a}"} for a in assignees]},
            "labels": {"nodes": [{"name": l} for l in labels]},
        }
        node.update(overrides)
        return node
    return _make_node


@pytest.fixture
def make_session():
    """Factory for an aiohttp session mock answering every POST with `body`"""
    def _make_session(body=None, status=200):
        resp = MagicMock()
        resp.status = status
        resp.json = AsyncMock(return_value=body)
        resp.text = AsyncMock(return_value=json.dumps(body))
        session = MagicMock()
        session.post.return_value.__aenter__.return_value = resp
        session.post.return_value.__aexit__.return_value = False
        return session
    return _make_session


@pytest.fixture
def config():
    return Config(
        github_token="test_token",
        github_owner="owner",
        github_repo="repo",
        slack_webhook_url="https://hooks.slack.com/services/T000/B000/XXXX",
        slack_channel="#issues",
        log_file="",
    )
