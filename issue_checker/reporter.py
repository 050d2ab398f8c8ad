#!/usr/bin/env python3
"""
Main reporter for the GitHub Issue Checker.

This module fetches the repository's issues, sorts them into report
categories and posts one Slack message per category.
"""

import asyncio
import logging
from typing import List, Optional

import aiohttp

from . import classifier
from .config import Config, DEFAULT_CONFIG_PATH
from .formatter import (
    NO_ASSIGNEE_TITLE,
    RECENTLY_CLOSED_TITLE,
    STALE_OPEN_TITLE,
    format_header,
    format_message,
)
from .github_client import GitHubClient
from .models import IssuePage, IssueState, OrderBy, OrderDirection, OrderField, QueryArgs
from .paginator import fetch_issues
from .slack_notifier import SlackNotifier

logger = logging.getLogger(__name__)

OPEN_ISSUES_ARGS = QueryArgs(
    states=IssueState.OPEN,
    order_by=OrderBy(OrderField.CREATED_AT, OrderDirection.ASC),
)
CLOSED_ISSUES_ARGS = QueryArgs(
    states=IssueState.CLOSED,
    order_by=OrderBy(OrderField.UPDATED_AT, OrderDirection.DESC),
)


class IssueReporter:
    """Builds and posts the issue report for one repository"""

    def __init__(
        self,
        config: Config,
        github_client: Optional[GitHubClient] = None,
        notifier: Optional[SlackNotifier] = None,
    ):
        self.config = config
        self.github_client = github_client or GitHubClient(config.github_token)
        self.notifier = notifier or SlackNotifier(
            config.slack_webhook_url,
            config.slack_channel,
            username=config.slack_username,
            icon_emoji=config.slack_icon_emoji,
            color=config.slack_attachment_color,
        )

    async def fetch(self, session: aiohttp.ClientSession):
        """Fetch all open issues and the latest page of closed issues"""
        open_issues = await fetch_issues(
            self.github_client,
            session,
            self.config.github_owner,
            self.config.github_repo,
            OPEN_ISSUES_ARGS,
            recursive=True,
            max_pages=self.config.max_pages,
        )
        logger.info(f"Fetched {len(open_issues.nodes)} open issues from {self.config.repository}")

        # Only the most recently updated page is considered for closed issues
        closed_issues = await fetch_issues(
            self.github_client,
            session,
            self.config.github_owner,
            self.config.github_repo,
            CLOSED_ISSUES_ARGS,
            recursive=False,
        )
        logger.info(f"Fetched {len(closed_issues.nodes)} closed issues from {self.config.repository}")
        return open_issues, closed_issues

    def build_messages(self, open_issues: IssuePage, closed_issues: IssuePage) -> List[str]:
        """Build the header and the three category messages, in posting order"""
        config = self.config
        sections = [
            (NO_ASSIGNEE_TITLE, classifier.no_assignee(open_issues.nodes)),
            (
                STALE_OPEN_TITLE.format(days=config.old_issue_days),
                classifier.stale_open(open_issues.nodes, config.old_issue_days),
            ),
            (
                RECENTLY_CLOSED_TITLE.format(days=config.recent_closed_issue_days),
                classifier.recently_closed(closed_issues.nodes, config.recent_closed_issue_days),
            ),
        ]
        messages = [format_header(config.github_owner, config.github_repo, open_issues.total_count)]
        for title, issues in sections:
            messages.append(
                format_message(title, issues, config.display_issue_max_number, config.separator)
            )
        return messages

    async def run(self):
        """Fetch, classify and post the report"""
        logger.info(f"Starting issue report for {self.config.repository}")

        async with aiohttp.ClientSession() as session:
            open_issues, closed_issues = await self.fetch(session)

        messages = self.build_messages(open_issues, closed_issues)
        for message in messages:
            await self.notifier.send_message(message)

        logger.info(f"Posted {len(messages)} messages to {self.config.slack_channel}")

    async def send_test_message(self):
        """Post a fixed message to check the webhook"""
        logger.info(f"Sending test message to {self.config.slack_channel}")
        await self.notifier.send_test_message()


def setup_logging(config: Config):
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.insert(0, logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


async def main(config_path: str = DEFAULT_CONFIG_PATH, test_message: bool = False):
    """Main entry point"""
    config = Config.load(config_path)
    setup_logging(config)
    reporter = IssueReporter(config)
    if test_message:
        await reporter.send_test_message()
    else:
        await reporter.run()


if __name__ == "__main__":
    asyncio.run(main())
