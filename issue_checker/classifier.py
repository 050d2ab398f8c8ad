"""Filters that sort fetched issues into report categories."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from .models import Issue


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def in_days(date: datetime, days: int, now: Optional[datetime] = None) -> bool:
    """True when `date` falls within the last `days` days."""
    comparison_date = _now(now) - timedelta(days=days)
    return comparison_date <= date


def no_assignee(issues: Sequence[Issue]) -> List[Issue]:
    return [issue for issue in issues if len(issue.assignees) == 0]


def stale_open(issues: Sequence[Issue], days: int, now: Optional[datetime] = None) -> List[Issue]:
    """Issues created more than `days` days ago."""
    now = _now(now)
    return [issue for issue in issues if not in_days(issue.created_at, days, now)]


def recently_closed(issues: Sequence[Issue], days: int, now: Optional[datetime] = None) -> List[Issue]:
    """Issues closed within the last `days` days."""
    now = _now(now)
    return [
        issue for issue in issues
        if issue.closed_at is not None and in_days(issue.closed_at, days, now)
    ]
