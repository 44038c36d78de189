#!/usr/bin/env python3
"""
Release Captain - Release Announcement

Prints the release notes for one platform and, once the release captain
confirms, posts them to every Slack webhook registered for that platform.

Usage:
    python announce.py tickets.csv webhooks.csv android

Input:
    tickets.csv   - Jira export with "Issue key", "Summary", "Issue Type", "Labels"
    webhooks.csv  - Slack webhooks with "URL", "platform"
"""

import sys
import logging
import argparse
from typing import List, Optional

from announcer import AnnouncementDispatcher
from captain_config import CaptainConfig as Config
from errors import ReleaseCaptainError
from formatter import ReleaseNotesFormatter
from tickets import load_tickets, parse_platform
from webhook_directory import load_webhooks, webhooks_for_platform

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None, input_func=input) -> int:
    """Main entry point for the release announcement."""
    parser = argparse.ArgumentParser(
        description='Announce release notes from a Jira CSV export on Slack',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python announce.py tickets.csv webhooks.csv android
  python announce.py tickets.csv webhooks.csv iOS
        """
    )
    parser.add_argument('tickets_csv', help='Path to the source CSV file')
    parser.add_argument('webhooks_csv', help='Path to the webhook CSV file')
    parser.add_argument('platform', help='Platform type, either Android or iOS')
    args = parser.parse_args(argv)

    Config.configure_logging()

    try:
        platform = parse_platform(args.platform)
        endpoints = webhooks_for_platform(load_webhooks(args.webhooks_csv), platform)
        tickets = load_tickets(args.tickets_csv, platform)
    except (ReleaseCaptainError, OSError) as e:
        logger.error(f"[Announce] ERROR: {e}")
        return 1

    formatter = ReleaseNotesFormatter(platform, separate_sections=False, include_hidden_section=False)
    release_notes = formatter.get_plain_text_notes(tickets)
    print(release_notes)

    dispatcher = AnnouncementDispatcher(release_notes, endpoints, platform, input_func=input_func)
    state = dispatcher.run()
    logger.info(f"[Announce] Finished in state: {state.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
