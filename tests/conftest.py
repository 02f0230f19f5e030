"""Shared fixtures for icstree tests."""

import os
from collections.abc import Generator
from typing import Any

import pytest

from icstree.config import ICSTreeSettings, get_settings


def pytest_configure(config: Any) -> None:
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Keep ICSTREE_* variables from the host out of the tests.

    Also clears the cached process-wide settings so each test sees the
    environment it sets up.
    """
    for key in list(os.environ):
        if key.startswith("ICSTREE_"):
            monkeypatch.delenv(key, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ICSTreeSettings:
    """Default settings that ignore any .env file in the working directory."""
    return ICSTreeSettings(_env_file=None)


MINIMAL_ICS = "BEGIN:VCALENDAR\nVERSION:2.0\nPRODID:-//X//Y//EN\nEND:VCALENDAR"

EVENT_ICS = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Google Inc//Google Calendar 70.9054//EN
CALSCALE:GREGORIAN
METHOD:PUBLISH
BEGIN:VEVENT
UID:google-event-001@google.com
DTSTAMP:20231201T120000Z
DTSTART:20231225T100000Z
DTEND:20231225T110000Z
SUMMARY:Christmas Team Lunch
DESCRIPTION:Annual holiday celebration lunch with the team
LOCATION:Restaurant XYZ\\, 123 Main St
STATUS:CONFIRMED
ATTENDEE;CN=Alice;ROLE=REQ-PARTICIPANT:mailto:alice@example.com
ATTENDEE;CN="Bob Smith";PARTSTAT=ACCEPTED:mailto:bob@example.com
RRULE:FREQ=WEEKLY;BYDAY=MO;UNTIL=20240331T235959Z
BEGIN:VALARM
ACTION:DISPLAY
TRIGGER:-PT15M
DESCRIPTION:Reminder
END:VALARM
END:VEVENT
END:VCALENDAR
"""

TIMEZONE_ICS = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Test//Test//EN
BEGIN:VTIMEZONE
TZID:America/New_York
BEGIN:DAYLIGHT
DTSTART:20070311T020000
TZOFFSETFROM:-0500
TZOFFSETTO:-0400
TZNAME:EDT
END:DAYLIGHT
BEGIN:STANDARD
DTSTART:20071104T020000
TZOFFSETFROM:-0400
TZOFFSETTO:-0500
TZNAME:EST
END:STANDARD
END:VTIMEZONE
BEGIN:VEVENT
UID:tz-event@example.com
DTSTAMP:20231201T120000Z
DTSTART;TZID=America/New_York:20231225T100000
SUMMARY:Local time event
END:VEVENT
END:VCALENDAR
"""


@pytest.fixture
def minimal_ics() -> str:
    return MINIMAL_ICS


@pytest.fixture
def event_ics() -> str:
    return EVENT_ICS


@pytest.fixture
def timezone_ics() -> str:
    return TIMEZONE_ICS
