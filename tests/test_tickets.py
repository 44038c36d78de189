"""Tests for ticket classification and loading."""

import pytest

from errors import ConfigurationError
from tickets import (
    Platform,
    Ticket,
    TicketCategory,
    Unknown,
    classify_ticket,
    load_tickets,
    parse_platform,
    ticket_from_row,
)


@pytest.mark.parametrize("value, expected", [
    ("android", Platform.ANDROID),
    ("Android", Platform.ANDROID),
    ("iOS", Platform.IOS),
    ("IOS", Platform.IOS),
])
def test_parse_platform_is_case_insensitive(value: str, expected: Platform) -> None:
    assert parse_platform(value) is expected


@pytest.mark.parametrize("value", ["", None, "windows", "androids"])
def test_parse_platform_rejects_unknown_values(value) -> None:
    with pytest.raises(ConfigurationError):
        parse_platform(value)


def test_platform_string_form_is_lowercase() -> None:
    assert str(Platform.ANDROID) == "android"
    assert str(Platform.IOS) == "ios"


def test_classify_story_without_chapter_label() -> None:
    assert classify_ticket("Story:android", Platform.ANDROID, []) is TicketCategory.STORY


def test_classify_story_with_platform_label_is_chapter() -> None:
    category = classify_ticket("Story:android", Platform.ANDROID, ["Android Chapter"])
    assert category is TicketCategory.CHAPTER


def test_classify_story_label_match_spans_repeated_columns() -> None:
    """Any of the label values may carry the platform name."""
    category = classify_ticket("Story:ios", Platform.IOS, ["", "growth", "IOS-chapter"])
    assert category is TicketCategory.CHAPTER


@pytest.mark.parametrize("issue_type, expected", [
    ("Analytics:ios", TicketCategory.ANALYTICS),
    ("Sub-Task:ios", TicketCategory.SUBTASK),
    ("Improvement:ios", TicketCategory.IMPROVEMENT),
    ("Bug:ios", TicketCategory.BUG),
])
def test_classify_direct_types(issue_type: str, expected: TicketCategory) -> None:
    assert classify_ticket(issue_type, Platform.IOS, []) is expected


def test_classify_unknown_type_keeps_raw_value() -> None:
    assert classify_ticket("Foo:android", Platform.ANDROID, []) == Unknown("Foo:android")


def test_classify_other_platform_is_unknown() -> None:
    assert classify_ticket("Bug:ios", Platform.ANDROID, []) == Unknown("Bug:ios")


def test_is_change() -> None:
    changes = {c for c in TicketCategory if c.is_change()}
    assert changes == {TicketCategory.STORY, TicketCategory.SUBTASK, TicketCategory.IMPROVEMENT}
    assert not Unknown("Task:android").is_change()


def test_ticket_from_row_skips_missing_required_fields() -> None:
    assert ticket_from_row({"Summary": ["Hello"]}, Platform.ANDROID) is None
    assert ticket_from_row({"Issue key": ["APP-1"]}, Platform.ANDROID) is None
    assert ticket_from_row({"Issue key": ["APP-1"], "Summary": [""]}, Platform.ANDROID) is None


def test_ticket_from_row_without_type_is_unknown() -> None:
    ticket = ticket_from_row({"Issue key": ["APP-1"], "Summary": ["Hello"]}, Platform.ANDROID)
    assert ticket == Ticket(key="APP-1", summary="Hello", category=Unknown(""))


def test_load_tickets_from_export(tickets_csv: str) -> None:
    tickets = load_tickets(tickets_csv, Platform.ANDROID)

    assert [t.key for t in tickets] == [
        "APP-1", "APP-2", "APP-3", "APP-4", "APP-5", "APP-6", "APP-7", "APP-8"
    ]
    by_key = {t.key: t.category for t in tickets}
    assert by_key["APP-1"] is TicketCategory.STORY
    assert by_key["APP-2"] is TicketCategory.CHAPTER
    assert by_key["APP-3"] is TicketCategory.BUG
    assert by_key["APP-4"] is TicketCategory.ANALYTICS
    assert by_key["APP-7"] == Unknown("Bug:ios")
    assert by_key["APP-8"] == Unknown("Task:android")


def test_load_tickets_is_independent_per_row(tickets_csv: str) -> None:
    """Classifying for iOS only depends on each row's own columns."""
    tickets = load_tickets(tickets_csv, Platform.IOS)
    known = [t for t in tickets if not isinstance(t.category, Unknown)]
    assert known == [Ticket(key="APP-7", summary="[iOS] Fix iPad layout", category=TicketCategory.BUG)]


def test_ticket_from_row_normalizes_key_whitespace() -> None:
    """Keys are trimmed, and a whitespace-only key counts as missing."""
    ticket = ticket_from_row({"Issue key": ["  APP-1 "], "Summary": ["Hello"]}, Platform.ANDROID)
    assert ticket.key == "APP-1"
    assert ticket_from_row({"Issue key": ["   "], "Summary": ["Hello"]}, Platform.ANDROID) is None
