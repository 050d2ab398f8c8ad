#!/usr/bin/env python3
"""
Slack notification manager for the Issue Checker.

This module posts report messages to a Slack channel through an
incoming webhook.
"""

import logging
from slack_sdk.webhook.async_client import AsyncWebhookClient

TEST_MESSAGE = "This is a test message from github-issue-checker."

logger = logging.getLogger(__name__)


class SlackNotifier:
    """Slack incoming-webhook notifier"""

    def __init__(
        self,
        webhook_url: str,
        channel: str,
        username: str = "github-issue-checker",
        icon_emoji: str = ":sunglasses:",
        color: str = "#7CD197",
    ):
        self.client = AsyncWebhookClient(url=webhook_url)
        self.channel = channel
        self.username = username
        self.icon_emoji = icon_emoji
        self.color = color

    def build_payload(self, text: str) -> dict:
        """Build the webhook body carrying `text` in a colored attachment"""
        return {
            "attachments": [
                {
                    "color": self.color,
                    "text": text
                }
            ],
            "channel": self.channel,
            "icon_emoji": self.icon_emoji,
            "link_names": 1,
            "username": self.username
        }

    async def send_message(self, text: str):
        """Send a message to Slack"""
        response = await self.client.send_dict(self.build_payload(text))
        if response.status_code != 200:
            logger.error(f"Failed to send Slack message: {response.status_code} {response.body}")
        return response

    async def send_test_message(self):
        """Send a fixed message to check webhook connectivity"""
        return await self.send_message(TEST_MESSAGE)
