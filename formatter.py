"""
Release Notes Formatter for Release Captain

This module handles formatting of release notes:
- Grouping tickets into fixed, ordered sections
- Stripping platform tags from ticket summaries
- Creating emoji-prefixed, column-aligned plain text

The changelog follows one template so everyone shares a common language:
    ✨ Changes: product-driven tickets
    🤖 Tech changes: tickets from the platform chapter board
    🐛 Bug fixes: bug tickets
    📈 Instrumentation: analytics tickets
    🏴 Included but not visible: tickets behind a feature flag or disabled
       for the end user (filled in by hand)
"""

import re
import logging
from typing import Callable, List, NamedTuple, Tuple

from captain_config import CaptainConfig as Config
from tickets import Category, Platform, Ticket, TicketCategory

logger = logging.getLogger(__name__)


class SectionRule(NamedTuple):
    """A release notes section and the tickets it collects."""

    title: str
    emoji: str
    matches: Callable[[Category], bool]


# Order for displaying sections
SECTION_RULES = [
    SectionRule(Config.CHANGES_TITLE, Config.CHANGE_EMOJI,
                lambda category: category.is_change()),
    SectionRule(Config.TECH_CHANGES_TITLE, Config.TECH_CHANGES_EMOJI,
                lambda category: category is TicketCategory.CHAPTER),
    SectionRule(Config.BUG_FIXES_TITLE, Config.BUG_EMOJI,
                lambda category: category is TicketCategory.BUG),
    SectionRule(Config.INSTRUMENTATION_TITLE, Config.INSTRUMENTATION_EMOJI,
                lambda category: category is TicketCategory.ANALYTICS),
]


def clean_summary(summary: str, platform: Platform) -> str:
    """
    Remove the platform tag from a ticket summary.

    Examples:
        "[Android] Fix crash on launch" -> "Fix crash on launch"
        "Update colors - iOS" -> "Update colors"

    Args:
        summary: Raw summary from Jira
        platform: Target platform

    Returns:
        Summary without "[<platform>]" or " - <platform>", trimmed
    """
    for tag in (f"[{platform}]", f" - {platform}"):
        summary = re.sub(re.escape(tag), "", summary, flags=re.IGNORECASE)
    return summary.strip()


class ReleaseNotesFormatter:
    """Formatter for creating release notes from classified tickets."""

    def __init__(self, platform: Platform, separate_sections: bool = True,
                 include_hidden_section: bool = False):
        """
        Initialize the formatter.

        Args:
            platform: Target platform, used to strip tags from summaries
            separate_sections: Emit a blank line after every section
            include_hidden_section: Append the "Included but not visible" placeholder
        """
        self.platform = platform
        self.separate_sections = separate_sections
        self.include_hidden_section = include_hidden_section

    def group_tickets(self, tickets: List[Ticket]) -> List[Tuple[SectionRule, List[Ticket]]]:
        """
        Group tickets into sections, keeping section order and ticket order.

        Tickets that match no section (unknown types) are left out.

        Returns:
            (section, tickets) pairs for non-empty sections only
        """
        grouped = []
        for rule in SECTION_RULES:
            section_tickets = [t for t in tickets if rule.matches(t.category)]
            if section_tickets:
                grouped.append((rule, section_tickets))
        return grouped

    def format_line(self, rule: SectionRule, ticket: Ticket) -> str:
        """Format one ticket line, e.g. "🐛 ABC-1           \\t Fix X"."""
        key = ticket.key.ljust(Config.TICKET_KEY_WIDTH)
        return f"{rule.emoji} {key} \t {clean_summary(ticket.summary, self.platform)}"

    def get_lines(self, tickets: List[Ticket]) -> List[str]:
        """
        Render the release notes as a list of lines.

        Args:
            tickets: Classified tickets

        Returns:
            Output lines, without line terminators
        """
        lines = []
        for rule, section_tickets in self.group_tickets(tickets):
            lines.append(rule.title)
            lines.extend(self.format_line(rule, ticket) for ticket in section_tickets)
            if self.separate_sections:
                lines.append("")

        if self.include_hidden_section:
            lines.append(Config.INCLUDED_BUT_NOT_VISIBLE_TITLE)
            lines.append(Config.INCLUDED_BUT_NOT_VISIBLE_NOTE)

        logger.debug(f"[Formatter] Rendered {len(tickets)} tickets into {len(lines)} lines")
        return lines

    def get_plain_text_notes(self, tickets: List[Ticket]) -> str:
        """Render the release notes as a single newline-joined string."""
        return "\n".join(self.get_lines(tickets))
