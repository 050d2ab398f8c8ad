#!/usr/bin/env python3
"""
Simple script to run the GitHub Issue Checker.

Usage: python run_checker.py [config.json]
"""

import sys
from pathlib import Path

# Add the current directory to the Python path
sys.path.insert(0, str(Path(__file__).parent))

from issue_checker.cli import run


if __name__ == "__main__":
    run()
