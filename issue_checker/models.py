#!/usr/bin/env python3
"""
Data models for the GitHub Issue Checker.

This module contains the data classes and enums used throughout the
checker, and the conversion of raw GraphQL nodes into typed snapshots.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

GITHUB_GRAPHQL_API_MAX_LIMIT = 100


class ResponseFormatError(ValueError):
    """Raised when a GraphQL payload is missing required fields"""


class IssueState(Enum):
    """State of a GitHub issue"""
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class OrderField(Enum):
    """Fields GitHub can order an issue connection by"""
    CREATED_AT = "CREATED_AT"
    UPDATED_AT = "UPDATED_AT"
    COMMENTS = "COMMENTS"


class OrderDirection(Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class OrderBy:
    """Ordering of an issue connection"""
    field: OrderField
    direction: OrderDirection

    def to_variable(self) -> Dict[str, str]:
        """Convert to the GraphQL IssueOrder input object"""
        return {"field": self.field.value, "direction": self.direction.value}


@dataclass(frozen=True)
class QueryArgs:
    """Arguments for fetching one page of issues"""
    states: IssueState
    order_by: OrderBy
    limit: int = GITHUB_GRAPHQL_API_MAX_LIMIT
    cursor: Optional[str] = None

    def __post_init__(self):
        if not 1 <= self.limit <= GITHUB_GRAPHQL_API_MAX_LIMIT:
            raise ValueError(
                f"limit must be between 1 and {GITHUB_GRAPHQL_API_MAX_LIMIT}, got {self.limit}"
            )

    def with_cursor(self, cursor: Optional[str]) -> "QueryArgs":
        """Return a copy continuing after the given cursor"""
        return replace(self, cursor=cursor)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub ISO-8601 timestamp into an aware datetime."""
    if value is None:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _handle(actor: Optional[Dict[str, Any]]) -> Optional[str]:
    # resourcePath looks like "/octocat"
    if not actor or not actor.get("resourcePath"):
        return None
    return actor["resourcePath"].lstrip("/")


@dataclass(frozen=True)
class Issue:
    """Snapshot of a GitHub issue as fetched by one run"""
    title: str
    url: str
    state: IssueState
    created_at: datetime
    updated_at: datetime
    closed_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    last_edited_at: Optional[datetime] = None
    author: Optional[str] = None
    assignees: Tuple[str, ...] = ()
    labels: Tuple[str, ...] = ()

    @classmethod
    def from_graphql(cls, node: Dict[str, Any]) -> "Issue":
        """Parse an issue from a GraphQL node.

        Raises ResponseFormatError when a required field is missing or
        cannot be parsed.
        """
        missing = [
            key for key in ("title", "url", "state", "createdAt", "updatedAt")
            if node.get(key) is None
        ]
        if missing:
            raise ResponseFormatError(f"Issue node is missing fields: {', '.join(missing)}")

        try:
            assignees = tuple(
                handle
                for handle in (_handle(a) for a in (node.get("assignees") or {}).get("nodes", []))
                if handle
            )
            labels = tuple(
                label["name"]
                for label in (node.get("labels") or {}).get("nodes", [])
                if label and label.get("name")
            )
            return cls(
                title=node["title"],
                url=node["url"],
                state=IssueState(node["state"]),
                created_at=parse_timestamp(node["createdAt"]),
                updated_at=parse_timestamp(node["updatedAt"]),
                closed_at=parse_timestamp(node.get("closedAt")),
                published_at=parse_timestamp(node.get("publishedAt")),
                last_edited_at=parse_timestamp(node.get("lastEditedAt")),
                author=_handle(node.get("author")),
                assignees=assignees,
                labels=labels,
            )
        except (ValueError, TypeError, AttributeError) as e:
            raise ResponseFormatError(f"Invalid issue node {node.get('url')}: {e}") from e


@dataclass(frozen=True)
class PageInfo:
    end_cursor: Optional[str] = None
    has_next_page: bool = False


@dataclass
class IssuePage:
    """One page (or an accumulation of pages) of an issue connection"""
    total_count: int = 0
    page_info: PageInfo = field(default_factory=PageInfo)
    nodes: List[Issue] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "IssuePage":
        """The degraded result used when a fetch yields nothing usable."""
        return cls()

    @classmethod
    def from_graphql(cls, connection: Dict[str, Any]) -> "IssuePage":
        """Parse an `issues` connection object."""
        if not isinstance(connection, dict):
            raise ResponseFormatError("Issue connection is not an object")
        if connection.get("totalCount") is None or connection.get("pageInfo") is None:
            raise ResponseFormatError("Issue connection is missing totalCount or pageInfo")

        page_info = connection["pageInfo"]
        return cls(
            total_count=int(connection["totalCount"]),
            page_info=PageInfo(
                end_cursor=page_info.get("endCursor"),
                has_next_page=bool(page_info.get("hasNextPage")),
            ),
            nodes=[cls._parse_node(node) for node in connection.get("nodes") or []],
        )

    @staticmethod
    def _parse_node(node: Any) -> Issue:
        if not isinstance(node, dict):
            raise ResponseFormatError("Issue node is not an object")
        return Issue.from_graphql(node)
