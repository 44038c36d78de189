#!/usr/bin/env python3
"""
Release Captain - Release Notes Report

Reads a Jira CSV export and prints categorized release notes for one platform.

Usage:
    python main.py tickets.csv android
    python main.py tickets.csv iOS
"""

import sys
import logging
import argparse
from typing import List, Optional

from captain_config import CaptainConfig as Config
from errors import ReleaseCaptainError
from formatter import ReleaseNotesFormatter
from tickets import load_tickets, parse_platform

logger = logging.getLogger(__name__)


def build_release_notes(path: str, platform_name: str, separate_sections: bool = True,
                        include_hidden_section: bool = True) -> str:
    """
    Load tickets and render the release notes text.

    Args:
        path: Path to the tickets CSV
        platform_name: "android" or "ios" (any case)
        separate_sections: Emit a blank line after every section
        include_hidden_section: Append the "Included but not visible" placeholder

    Returns:
        Release notes text

    Raises:
        ConfigurationError: If the platform is invalid
        MalformedInputError: If the CSV has no header
    """
    platform = parse_platform(platform_name)
    tickets = load_tickets(path, platform)
    formatter = ReleaseNotesFormatter(
        platform,
        separate_sections=separate_sections,
        include_hidden_section=include_hidden_section
    )
    return formatter.get_plain_text_notes(tickets)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the release notes report."""
    parser = argparse.ArgumentParser(
        description='Print categorized release notes from a Jira CSV export',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py tickets.csv android
  python main.py tickets.csv iOS
        """
    )
    parser.add_argument('tickets_csv', help='Path to the source CSV file')
    parser.add_argument('platform', help='Platform type, either Android or iOS')
    args = parser.parse_args(argv)

    Config.configure_logging()

    try:
        release_notes = build_release_notes(args.tickets_csv, args.platform)
    except (ReleaseCaptainError, OSError) as e:
        logger.error(f"[Release Notes] ERROR: {e}")
        return 1

    print(release_notes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
