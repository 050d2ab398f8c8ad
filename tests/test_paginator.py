"""Unit tests for cursor pagination"""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from issue_checker.github_client import GitHubClient
from issue_checker.models import (
    IssuePage,
    IssueState,
    OrderBy,
    OrderDirection,
    OrderField,
    PageInfo,
    QueryArgs,
)
from issue_checker.paginator import fetch_issues

ARGS = QueryArgs(IssueState.OPEN, OrderBy(OrderField.CREATED_AT, OrderDirection.ASC))


@pytest.fixture
def make_page(make_issue):
    def _make_page(prefix, count, has_next_page, end_cursor=None, total_count=205):
        return IssuePage(
            total_count=total_count,
            page_info=PageInfo(end_cursor=end_cursor, has_next_page=has_next_page),
            nodes=[make_issue(title=f"{prefix}{i}", number=i) for i in range(count)],
        )
    return _make_page


@pytest.fixture
def three_pages(make_page):
    return [
        make_page("A", 100, True, "cursor-a"),
        make_page("B", 100, True, "cursor-b"),
        make_page("C", 5, False, "cursor-c"),
    ]


def mock_client(pages):
    client = MagicMock()
    client.fetch_issue_page = AsyncMock(side_effect=pages)
    return client


@pytest.mark.asyncio
async def test_recursive_follows_cursors(three_pages):
    client = mock_client(three_pages)

    result = await fetch_issues(client, MagicMock(), "owner", "repo", ARGS, recursive=True)

    assert len(result.nodes) == 205
    assert client.fetch_issue_page.call_count == 3
    titles = [issue.title for issue in result.nodes]
    assert titles[:100] == [f"A{i}" for i in range(100)]
    assert titles[100:200] == [f"B{i}" for i in range(100)]
    assert titles[200:] == [f"C{i}" for i in range(5)]
    assert result.total_count == 205


@pytest.mark.asyncio
async def test_recursive_passes_cursor(three_pages):
    client = mock_client(three_pages)

    await fetch_issues(client, MagicMock(), "owner", "repo", ARGS, recursive=True)

    cursors = [call.args[3].cursor for call in client.fetch_issue_page.call_args_list]
    assert cursors == [None, "cursor-a", "cursor-b"]
    # caller's args are left untouched
    assert ARGS.cursor is None


@pytest.mark.asyncio
async def test_non_recursive_single_fetch(three_pages):
    client = mock_client(three_pages)

    result = await fetch_issues(client, MagicMock(), "owner", "repo", ARGS, recursive=False)

    assert client.fetch_issue_page.call_count == 1
    assert len(result.nodes) == 100
    assert result.page_info.has_next_page is True


@pytest.mark.asyncio
async def test_max_pages_bound(three_pages, caplog):
    client = mock_client(three_pages)

    with caplog.at_level(logging.WARNING):
        result = await fetch_issues(client, MagicMock(), "owner", "repo", ARGS,
                                    recursive=True, max_pages=2)

    assert client.fetch_issue_page.call_count == 2
    assert len(result.nodes) == 200
    assert "after 2 pages" in caplog.text


@pytest.mark.asyncio
async def test_graphql_errors_stop_after_one_call(make_session):
    """A GraphQL error page is empty and ends the loop"""
    session = make_session({"errors": [{"message": "rate limited"}]})

    result = await fetch_issues(GitHubClient("test_token"), session, "owner", "repo", ARGS,
                                recursive=True)

    assert result.nodes == []
    assert session.post.call_count == 1


@pytest.mark.asyncio
async def test_degraded_page_keeps_earlier_totals(make_page):
    """An empty page after an error keeps the totals of the last real page"""
    client = mock_client([make_page("A", 100, True, "cursor-a", total_count=150), IssuePage.empty()])

    result = await fetch_issues(client, MagicMock(), "owner", "repo", ARGS, recursive=True)

    assert client.fetch_issue_page.call_count == 2
    assert len(result.nodes) == 100
    assert result.total_count == 150
    assert result.page_info.end_cursor == "cursor-a"
