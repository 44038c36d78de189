"""
Ticket model and classifier for Release Captain

This module turns rows of a Jira CSV export into typed tickets:
- Parsing the target platform (Android or iOS)
- Classifying each row by issue type, platform and labels
- Skipping rows that lack a key or a summary
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from captain_config import CaptainConfig as Config
from csv_loader import process_csv
from errors import ConfigurationError

logger = logging.getLogger(__name__)


class Platform(Enum):
    """Target platform of a release. The value is the canonical lowercase name."""

    ANDROID = "android"
    IOS = "ios"

    def __str__(self) -> str:
        return self.value


class TicketCategory(Enum):
    """Release notes bucket a ticket belongs to."""

    ANALYTICS = "Analytics"
    STORY = "Story"
    SUBTASK = "Sub-Task"
    IMPROVEMENT = "Improvement"
    BUG = "Bug"
    CHAPTER = "Chapter"

    def is_change(self) -> bool:
        """
        Returns if the ticket is a "change", which can either be
        a story, a sub-task or an improvement.
        """
        return self in (TicketCategory.STORY, TicketCategory.SUBTASK, TicketCategory.IMPROVEMENT)


@dataclass(frozen=True)
class Unknown:
    """Issue type that does not match any known category for the platform."""

    raw_type: str

    def is_change(self) -> bool:
        return False


Category = Union[TicketCategory, Unknown]


@dataclass(frozen=True)
class Ticket:
    """A single Jira ticket as it appears in the release notes."""

    key: str
    summary: str
    category: Category


def parse_platform(value: Optional[str]) -> Platform:
    """
    Map a command line value to a Platform (case-insensitive).

    Raises:
        ConfigurationError: If the value is neither Android nor iOS
    """
    if not value:
        raise ConfigurationError("Missing platform type, it should be either Android or iOS")

    try:
        return Platform(value.lower())
    except ValueError:
        raise ConfigurationError(
            f"The platform type needs to be either Android or iOS, got '{value}'"
        ) from None


# Issue types that map straight to a category, Story is handled separately
_DIRECT_TYPES = {
    "Analytics": TicketCategory.ANALYTICS,
    "Sub-Task": TicketCategory.SUBTASK,
    "Improvement": TicketCategory.IMPROVEMENT,
    "Bug": TicketCategory.BUG,
}


def classify_ticket(issue_type: str, platform: Platform, labels: List[str]) -> Category:
    """
    Classify a ticket from its issue type and labels.

    Issue types in the export look like "Bug:android". A Story whose labels
    mention the platform (e.g. "Android Chapter") comes from the chapter board
    and is classified as CHAPTER.

    Args:
        issue_type: Raw "Issue Type" value
        platform: Target platform
        labels: All values of the "Labels" columns

    Returns:
        TicketCategory, or Unknown carrying the raw issue type
    """
    for name, category in _DIRECT_TYPES.items():
        if issue_type == f"{name}:{platform}":
            return category

    if issue_type == f"Story:{platform}":
        if platform.value in " ".join(labels).lower():
            return TicketCategory.CHAPTER
        return TicketCategory.STORY

    return Unknown(issue_type)


def _first(row: Dict[str, List[str]], column: str) -> Optional[str]:
    values = row.get(column)
    return values[0] if values else None


def ticket_from_row(row: Dict[str, List[str]], platform: Platform) -> Optional[Ticket]:
    """
    Build a Ticket from a CSV row.

    Keys are normalized: surrounding whitespace is trimmed before the key is
    padded for display, and a whitespace-only key counts as missing.

    Returns:
        Ticket, or None when the issue key or summary is missing
    """
    key = _first(row, Config.ISSUE_KEY_COLUMN)
    summary = _first(row, Config.SUMMARY_COLUMN)
    if not key or not key.strip() or not summary or not summary.strip():
        return None

    issue_type = _first(row, Config.ISSUE_TYPE_COLUMN) or ""
    labels = row.get(Config.LABELS_COLUMN, [])

    return Ticket(
        key=key.strip(),
        summary=summary,
        category=classify_ticket(issue_type, platform, labels)
    )


def load_tickets(path: str, platform: Platform) -> List[Ticket]:
    """
    Load all tickets for a platform from a Jira CSV export.

    Args:
        path: Path to the tickets CSV
        platform: Target platform

    Returns:
        Tickets in file order, skipped rows dropped
    """
    tickets = [
        ticket for ticket in process_csv(path, lambda row: ticket_from_row(row, platform))
        if ticket is not None
    ]

    unknown = sum(1 for t in tickets if isinstance(t.category, Unknown))
    logger.info(f"[Tickets] Loaded {len(tickets)} tickets for {platform}")
    logger.debug(f"[Tickets] {unknown} tickets have an unknown type and are left out")
    return tickets
