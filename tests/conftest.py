"""Shared pytest fixtures."""

import pytest


TICKETS_CSV = (
    "\ufeffIssue key,Summary,Issue Type,Labels,Labels\n"
    "APP-1,[Android] Update app colors,Story:android,,\n"
    "APP-2,Improve app performance - Android,Story:android,Android Chapter,perf\n"
    "APP-3,[Android] Fix app crashing on launch,Bug:android,,\n"
    "APP-4,Send event on app launch,Analytics:android,,\n"
    "APP-5,Polish settings screen,Improvement:android,,\n"
    "APP-6,Split onboarding,Sub-Task:android,,\n"
    "APP-7,[iOS] Fix iPad layout,Bug:ios,,\n"
    "APP-8,Write docs,Task:android,,\n"
    "APP-9,,Bug:android,,\n"
)

WEBHOOKS_CSV = (
    "URL,platform\n"
    "https://hooks.slack.com/services/T000/B001/android,android\n"
    "https://hooks.slack.com/services/T000/B002/ios,ios\n"
    "https://hooks.slack.com/services/T000/B003/android2,android\n"
    ",android\n"
)


@pytest.fixture
def tickets_csv(tmp_path) -> str:
    """Write a small Jira export and return its path."""
    path = tmp_path / "tickets.csv"
    path.write_text(TICKETS_CSV, encoding="utf-8")
    return str(path)


@pytest.fixture
def webhooks_csv(tmp_path) -> str:
    """Write a webhook directory and return its path."""
    path = tmp_path / "webhooks.csv"
    path.write_text(WEBHOOKS_CSV, encoding="utf-8")
    return str(path)
