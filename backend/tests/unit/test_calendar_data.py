"""
Tests for the static event catalog.
"""

from datetime import date

import pytest

from opsboard.data.calendar_data import (
    CATALOG_MONTHS,
    EVENTS,
    days_in_month,
    first_weekday_of_month,
    generate_session_events,
    list_events_on_date,
)
from opsboard.models.enums import CalendarEventType


def test_events_on_first_session_day_keep_catalog_order():
    titles = [event.title for event in list_events_on_date(date(2026, 3, 9))]

    assert titles == ["Session #1", "OT", "Registration change period"]


def test_events_on_date_accepts_iso_string():
    titles = [event.title for event in list_events_on_date("2026-02-14")]

    assert titles == ["Cohort 5 recruiting", "Lunar New Year holidays"]


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2026, 2, 18), True),   # last day of the range
        (date(2026, 2, 19), False),  # day after the range
        (date(2026, 2, 13), False),  # day before the range
    ],
)
def test_range_events_include_both_ends(day, expected):
    titles = [event.title for event in list_events_on_date(day)]

    assert ("Lunar New Year holidays" in titles) is expected


def test_no_events_outside_catalog():
    assert list_events_on_date(date(2025, 12, 25)) == []


def test_phase_one_sessions():
    """Mondays and Thursdays from 3/9, skipping the midterm recess."""
    sessions = [e for e in generate_session_events() if e.title.startswith("Session #")]

    assert len(sessions) == 23
    assert sessions[0].date == date(2026, 3, 9)
    assert sessions[-1].title == "Session #23"
    assert sessions[-1].date == date(2026, 6, 8)
    assert all(e.date.weekday() in (0, 3) for e in sessions)
    assert not [e for e in sessions if date(2026, 4, 14) <= e.date <= date(2026, 4, 27)]
    # numbering continues across the recess
    after_recess = next(e for e in sessions if e.date == date(2026, 4, 30))
    assert after_recess.title == "Session #12"


def test_sprint_sessions():
    sprints = [e for e in generate_session_events() if e.title.startswith("Sprint #")]

    assert [e.date.day for e in sprints] == [6, 9, 13, 16, 20, 23, 27, 30]
    assert all(e.date.month == 7 for e in sprints)
    assert sprints[0].title == "Sprint #1"
    assert sprints[0].description == "Mon 19:00-22:00 | Final Sprint"
    assert sprints[1].description == "Thu 20:00-22:00 | Final Sprint"


def test_sessions_come_before_fixed_events():
    session_count = len(generate_session_events())

    assert all(e.type == CalendarEventType.SESSION for e in EVENTS[:session_count])
    assert all(e.type != CalendarEventType.SESSION for e in EVENTS[session_count:])


def test_range_entries_end_after_start():
    for event in EVENTS:
        if event.end_date is not None:
            assert event.end_date >= event.date, event.title


def test_catalog_months():
    assert [(m.year, m.month) for m in CATALOG_MONTHS] == [(2026, month) for month in range(2, 9)]
    assert CATALOG_MONTHS[0].name == "February"
    assert CATALOG_MONTHS[-1].name == "August"


def test_month_helpers():
    assert days_in_month(2026, 2) == 28
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2026, 8) == 31
    assert first_weekday_of_month(2026, 3) == 0  # Sunday
    assert first_weekday_of_month(2026, 4) == 3  # Wednesday
    assert first_weekday_of_month(2026, 8) == 6  # Saturday
