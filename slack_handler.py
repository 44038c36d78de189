"""
Slack Webhook Handler for Release Captain

This module posts release announcements to Slack incoming webhooks.
There is no retry: a failed request raises and aborts the announcement.
"""

import logging
from typing import Dict, List, Optional

import requests

from captain_config import CaptainConfig as Config
from webhook_directory import WebhookEndpoint

logger = logging.getLogger(__name__)


class SlackHandler:
    """Handler for posting messages to Slack incoming webhooks."""

    def __init__(self, timeout: Optional[int] = None):
        """
        Initialize Slack handler.

        Args:
            timeout: Request timeout in seconds (defaults to WEBHOOK_TIMEOUT_SECONDS)
        """
        self.timeout = Config.WEBHOOK_TIMEOUT_SECONDS if timeout is None else timeout

    def send_webhook_message(self, webhook_url: str, text: str) -> requests.Response:
        """
        Send a message via webhook.

        The payload is {"text": text}. The response is logged but not validated.

        Args:
            webhook_url: Slack incoming webhook URL
            text: Message text

        Returns:
            The HTTP response

        Raises:
            requests.RequestException: If the request could not be sent
        """
        payload: Dict[str, str] = {"text": text}

        response = requests.post(
            webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout
        )

        if response.status_code == 200:
            logger.info("[Slack] Webhook message sent successfully")
        else:
            logger.warning(f"[Slack] Webhook responded with {response.status_code} - {response.text}")

        return response

    def announce(self, endpoints: List[WebhookEndpoint], text: str) -> List[requests.Response]:
        """
        Post the same message to every endpoint, one request each.

        Args:
            endpoints: Target webhooks
            text: Message text

        Returns:
            Responses in endpoint order
        """
        if not endpoints:
            logger.warning("[Slack] No webhook endpoints to announce to")
        return [self.send_webhook_message(endpoint.url, text) for endpoint in endpoints]
