"""
Announcement Dispatcher for Release Captain

Asks the release captain for confirmation, collects the release details and
posts the release notes to every Slack webhook registered for the platform.

Confirmation flow:
    AWAIT_CONFIRMATION --"y"--> ANNOUNCING --> ANNOUNCED
    AWAIT_CONFIRMATION --"n"--> CANCELLED
    AWAIT_CONFIRMATION --other--> AWAIT_CONFIRMATION (at most MAX_CONFIRMATION_ATTEMPTS)
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from captain_config import CaptainConfig as Config
from slack_handler import SlackHandler
from tickets import Platform
from webhook_directory import WebhookEndpoint

logger = logging.getLogger(__name__)

CONFIRMATION_QUESTION = "Captain, do you want me to announce to fellow Cluebies on your behalf? Press Y/N"
INVALID_INPUT_QUESTION = "Please enter a correct input. Press Y/N"


class AnnouncementState(Enum):
    """Where the confirmation and announcement flow currently stands."""

    AWAIT_CONFIRMATION = "await_confirmation"
    CANCELLED = "cancelled"
    ANNOUNCING = "announcing"
    ANNOUNCED = "announced"


def compose_announcement(platform: Platform, captain: str, co_captain: str,
                         version: str, release_notes: str) -> str:
    """
    Build the Slack message: a header sentence, a blank line and the notes.

    Args:
        platform: Target platform
        captain: Release captain name
        co_captain: Release co-captain name
        version: Version being released
        release_notes: Rendered release notes

    Returns:
        Complete message text
    """
    header = (
        f"Hey, for this release in {platform}, {captain} is the release captain "
        f"and {co_captain} is co-captain. Here are the changes in version {version}"
    )
    return f"{header}\n\n{release_notes}"


class AnnouncementDispatcher:
    """Interactive confirmation and delivery of a release announcement."""

    def __init__(self, release_notes: str, endpoints: List[WebhookEndpoint], platform: Platform,
                 slack: Optional[SlackHandler] = None, input_func: Callable[[], str] = input,
                 output_func: Callable[[str], None] = print, max_attempts: Optional[int] = None):
        """
        Initialize the dispatcher.

        Args:
            release_notes: Rendered release notes
            endpoints: Webhooks already filtered for the platform
            platform: Target platform
            slack: Handler used to post messages
            input_func: Reads one line from the operator
            output_func: Shows one line to the operator
            max_attempts: Maximum number of Y/N prompts before giving up
        """
        self.release_notes = release_notes
        self.endpoints = endpoints
        self.platform = platform
        self.slack = slack or SlackHandler()
        self.input_func = input_func
        self.output_func = output_func
        self.max_attempts = Config.MAX_CONFIRMATION_ATTEMPTS if max_attempts is None else max_attempts
        self.state = AnnouncementState.AWAIT_CONFIRMATION
        self.message: Optional[str] = None

    def _read_line(self) -> Optional[str]:
        """Read a line from the operator, None at end of input."""
        try:
            return self.input_func()
        except EOFError:
            return None

    def _ask(self, question: str) -> Optional[str]:
        self.output_func(question)
        return self._read_line()

    def _cancel(self) -> AnnouncementState:
        self.output_func("Ciao!")
        self.state = AnnouncementState.CANCELLED
        return self.state

    def confirm(self) -> AnnouncementState:
        """
        Ask whether to announce until a valid answer is given.

        Returns:
            ANNOUNCING on "y", CANCELLED on "n", end of input or too many invalid answers
        """
        question = CONFIRMATION_QUESTION
        for attempt in range(1, self.max_attempts + 1):
            answer = self._ask(question)
            if answer is None:
                logger.info("[Announcer] End of input, cancelling announcement")
                return self._cancel()

            answer = answer.strip().lower()
            if answer == "y":
                self.state = AnnouncementState.ANNOUNCING
                return self.state
            if answer == "n":
                return self._cancel()

            logger.debug(f"[Announcer] Invalid answer '{answer}' (attempt {attempt}/{self.max_attempts})")
            question = INVALID_INPUT_QUESTION

        logger.warning(f"[Announcer] No valid answer after {self.max_attempts} attempts")
        return self._cancel()

    def announce(self) -> AnnouncementState:
        """
        Collect the release details and post the announcement to every endpoint.

        Returns:
            ANNOUNCED, or CANCELLED if the input ended before all details were given
        """
        self.output_func("Great! Let us start the announcement")

        captain = self._ask("Who is the captain for the release?")
        co_captain = None if captain is None else self._ask("Great! Now, who would be your co-captain?")
        version = None if co_captain is None else self._ask("And lastly, what is the version we are releasing?")
        if version is None:
            logger.info("[Announcer] End of input before release details were complete")
            return self._cancel()

        self.message = compose_announcement(
            self.platform, captain.strip(), co_captain.strip(), version.strip(), self.release_notes
        )

        logger.info(f"[Announcer] Posting announcement to {len(self.endpoints)} webhooks")
        self.slack.announce(self.endpoints, self.message)
        self.state = AnnouncementState.ANNOUNCED
        return self.state

    def run(self) -> AnnouncementState:
        """Run the full flow: confirmation, then announcement if confirmed."""
        if self.confirm() is AnnouncementState.ANNOUNCING:
            return self.announce()
        return self.state
