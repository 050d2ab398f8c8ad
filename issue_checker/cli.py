#!/usr/bin/env python3
"""
Command-line entry points for the GitHub Issue Checker.

`run` posts the full report; `send_test_message` only checks the Slack webhook.
The config path is the first argument, then $ISSUE_CHECKER_CONFIG, then
config.json.
"""

import asyncio
import logging
import os
import sys

from .config import DEFAULT_CONFIG_PATH
from .reporter import main


def _config_path(argv) -> str:
    if len(argv) > 1:
        return argv[1]
    return os.environ.get("ISSUE_CHECKER_CONFIG", DEFAULT_CONFIG_PATH)


def _run(test_message: bool, argv=None):
    argv = sys.argv if argv is None else argv
    try:
        asyncio.run(main(_config_path(argv), test_message=test_message))
    except KeyboardInterrupt:
        logging.info("Issue checker stopped by user")
        sys.exit(0)
    except Exception as e:
        logging.error(f"Issue checker failed: {e}")
        sys.exit(1)


def run(argv=None):
    _run(test_message=False, argv=argv)


def send_test_message(argv=None):
    _run(test_message=True, argv=argv)
