#!/usr/bin/env python3
"""
Configuration management for the GitHub Issue Checker.

This module handles loading and validating configuration from JSON files.
The resulting Config is immutable and is passed to each component.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from .paginator import DEFAULT_MAX_PAGES

DEFAULT_CONFIG_PATH = "config.json"


def _positive_int(section: Dict, key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"Config field {key} must be a positive integer, got {value!r}")
    return value


def _required(section: Dict, section_name: str, key: str) -> str:
    value = section.get(key)
    if not value:
        raise ValueError(f"Missing required config field: {section_name}.{key}")
    return value


@dataclass(frozen=True)
class Config:
    """Configuration for one checker run"""
    github_token: str
    github_owner: str
    github_repo: str
    slack_webhook_url: str
    slack_channel: str
    slack_icon_emoji: str = ":sunglasses:"
    slack_username: str = "github-issue-checker"
    slack_attachment_color: str = "#7CD197"
    old_issue_days: int = 60
    recent_closed_issue_days: int = 1
    display_issue_max_number: int = 50
    separator: str = " "
    max_pages: int = DEFAULT_MAX_PAGES
    log_file: str = "issue_checker.log"
    log_level: str = "INFO"

    @property
    def repository(self) -> str:
        return f"{self.github_owner}/{self.github_repo}"

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> "Config":
        """Load configuration from JSON file"""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                "Please create it from config.example.json"
            )

        with open(path) as f:
            config = json.load(f)

        return cls.from_dict(config)

    @classmethod
    def from_dict(cls, config: Dict) -> "Config":
        # Validate required fields (report and logging are optional)
        required = ["github", "slack"]
        for field in required:
            if field not in config:
                raise ValueError(f"Missing required config field: {field}")

        github = config["github"]
        slack = config["slack"]
        report = config.get("report", {})
        logging_section = config.get("logging", {})

        return cls(
            github_token=_required(github, "github", "token"),
            github_owner=_required(github, "github", "owner"),
            github_repo=_required(github, "github", "repo"),
            slack_webhook_url=_required(slack, "slack", "webhook_url"),
            slack_channel=_required(slack, "slack", "channel"),
            slack_icon_emoji=slack.get("icon_emoji") or cls.slack_icon_emoji,
            slack_username=slack.get("username") or cls.slack_username,
            slack_attachment_color=slack.get("attachment_color") or cls.slack_attachment_color,
            old_issue_days=_positive_int(report, "old_issue_days", cls.old_issue_days),
            recent_closed_issue_days=_positive_int(
                report, "recent_closed_issue_days", cls.recent_closed_issue_days
            ),
            display_issue_max_number=_positive_int(
                report, "display_issue_max_number", cls.display_issue_max_number
            ),
            separator=report.get("separator", cls.separator),
            max_pages=_positive_int(github, "max_pages", cls.max_pages),
            log_file=logging_section.get("file", cls.log_file),
            log_level=logging_section.get("level", cls.log_level).upper(),
        )
