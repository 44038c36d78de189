"""
Configuration for Release Captain

This module contains all configuration settings for the release notes tools.
All values can be overridden via environment variables (or a .env file).
"""

import os
import sys
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class CaptainConfig:
    """Configuration settings for release notes generation and announcement."""

    # Logging configuration
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

    # Announcement settings
    MAX_CONFIRMATION_ATTEMPTS = int(os.getenv('MAX_CONFIRMATION_ATTEMPTS', '5'))
    WEBHOOK_TIMEOUT_SECONDS = int(os.getenv('WEBHOOK_TIMEOUT_SECONDS', '30'))

    # Column alignment for ticket keys
    TICKET_KEY_WIDTH = int(os.getenv('TICKET_KEY_WIDTH', '15'))

    # Section emojis
    CHANGE_EMOJI = "✨"
    TECH_CHANGES_EMOJI = "🤖"
    BUG_EMOJI = "🐛"
    INSTRUMENTATION_EMOJI = "📈"

    # Section titles
    CHANGES_TITLE = "Changes"
    TECH_CHANGES_TITLE = "Tech changes"
    BUG_FIXES_TITLE = "Bug fixes"
    INSTRUMENTATION_TITLE = "Instrumentation"
    INCLUDED_BUT_NOT_VISIBLE_TITLE = "Included but not visible"
    INCLUDED_BUT_NOT_VISIBLE_NOTE = "TODO: Move the tickets from above or delete this section if none"

    # Ticket CSV columns
    ISSUE_KEY_COLUMN = "Issue key"
    SUMMARY_COLUMN = "Summary"
    ISSUE_TYPE_COLUMN = "Issue Type"
    LABELS_COLUMN = "Labels"

    # Webhook CSV columns
    WEBHOOK_URL_COLUMN = "URL"
    WEBHOOK_PLATFORM_COLUMN = "platform"

    @classmethod
    def configure_logging(cls) -> None:
        """Configure root logging. Logs go to stderr so stdout only carries the notes."""
        logging.basicConfig(
            level=getattr(logging, cls.LOG_LEVEL.upper(), logging.INFO),
            format=cls.LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stderr)]
        )
