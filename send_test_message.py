#!/usr/bin/env python3
"""
Manual check for the Slack webhook.

Posts a fixed test message to the configured channel without touching GitHub.
Usage: python send_test_message.py [config.json]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from issue_checker.cli import send_test_message


if __name__ == "__main__":
    send_test_message()
