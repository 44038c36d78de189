"""
Webhook Directory for Release Captain

Loads the CSV that maps a platform to the Slack webhook URLs that should
receive its release announcement.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from captain_config import CaptainConfig as Config
from csv_loader import process_csv
from tickets import Platform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WebhookEndpoint:
    """A Slack incoming webhook and the platform it announces."""

    url: str
    platform: str


def endpoint_from_row(row: Dict[str, List[str]]) -> Optional[WebhookEndpoint]:
    """Build a WebhookEndpoint, or None when the URL or platform is missing."""
    url = (row.get(Config.WEBHOOK_URL_COLUMN) or [""])[0].strip()
    platform = (row.get(Config.WEBHOOK_PLATFORM_COLUMN) or [""])[0].strip()
    if not url or not platform:
        return None
    return WebhookEndpoint(url=url, platform=platform)


def load_webhooks(path: str) -> List[WebhookEndpoint]:
    """
    Load all webhook endpoints from a CSV file with "URL" and "platform" columns.

    Args:
        path: Path to the webhook CSV

    Returns:
        Endpoints in file order, incomplete rows dropped
    """
    endpoints = [e for e in process_csv(path, endpoint_from_row) if e is not None]
    logger.info(f"[Webhooks] Loaded {len(endpoints)} webhook endpoints")
    return endpoints


def webhooks_for_platform(endpoints: List[WebhookEndpoint], platform: Platform) -> List[WebhookEndpoint]:
    """Return the endpoints registered for the given platform."""
    matching = [e for e in endpoints if e.platform == platform.value]
    logger.info(f"[Webhooks] {len(matching)} endpoints registered for {platform}")
    return matching
