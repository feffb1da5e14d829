"""
Static 2026 event catalog.

Holidays, academic dates and program events for February to August 2026,
plus the Monday/Thursday session series generated from date-range rules.
The catalog is built once at import and never mutated.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Iterator

from opsboard.models.calendar import CalendarEvent, CatalogMonth
from opsboard.models.enums import CalendarEventType as T

MONDAY = 0
THURSDAY = 3

# Phase 1: regular sessions, paused for the midterm recess, ending before finals
PHASE1_START = date(2026, 3, 9)
PHASE1_END = date(2026, 6, 9)  # exclusive, finals recess starts here
MIDTERM_RECESS = (date(2026, 4, 14), date(2026, 4, 27))  # inclusive

# Phase 2: final sprint up to demo day
SPRINT_START = date(2026, 7, 6)
DEMO_DAY = date(2026, 8, 1)  # exclusive

SESSION_HOURS = {
    MONDAY: "Mon 19:00-22:00",
    THURSDAY: "Thu 20:00-22:00",
}


def _days(start: date, end: date) -> Iterator[date]:
    """Yield each day in [start, end)."""
    current = start
    while current < end:
        yield current
        current += timedelta(days=1)


def generate_session_events() -> list[CalendarEvent]:
    """Build the Monday/Thursday session series for both phases."""
    sessions: list[CalendarEvent] = []

    count = 1
    recess_start, recess_end = MIDTERM_RECESS
    for day in _days(PHASE1_START, PHASE1_END):
        if recess_start <= day <= recess_end:
            continue
        hours = SESSION_HOURS.get(day.weekday())
        if hours is None:
            continue
        sessions.append(
            CalendarEvent(date=day, title=f"Session #{count}", type=T.SESSION, description=hours)
        )
        count += 1

    count = 1
    for day in _days(SPRINT_START, DEMO_DAY):
        hours = SESSION_HOURS.get(day.weekday())
        if hours is None:
            continue
        sessions.append(
            CalendarEvent(
                date=day,
                title=f"Sprint #{count}",
                type=T.SESSION,
                description=f"{hours} | Final Sprint",
            )
        )
        count += 1

    return sessions


def _event(start: str, title: str, type_: T, end: str | None = None, description: str | None = None) -> CalendarEvent:
    return CalendarEvent(
        date=date.fromisoformat(start),
        end_date=date.fromisoformat(end) if end else None,
        title=title,
        type=type_,
        description=description,
    )


FIXED_EVENTS: tuple[CalendarEvent, ...] = (
    # ========== February ==========
    _event("2026-02-14", "Cohort 5 recruiting", T.PROGRAM, end="2026-03-05", description="Application period"),
    _event("2026-02-14", "Lunar New Year holidays", T.HOLIDAY, end="2026-02-18", description="Sat-Wed, 5 days"),
    _event("2026-02-28", "Independence Movement Day weekend", T.HOLIDAY),
    _event("2026-02-09", "Course registration", T.ACADEMIC, end="2026-02-13"),
    _event("2026-02-23", "Tuition payment period", T.ACADEMIC, end="2026-02-27"),
    _event("2026-02-24", "Freshman course registration", T.ACADEMIC),
    _event("2026-02-26", "Returning student course registration", T.ACADEMIC),
    # ========== March ==========
    _event("2026-03-06", "Cohort 5 interviews", T.PROGRAM_IMPORTANT, end="2026-03-08", description="Interviews and decisions"),
    _event("2026-03-09", "OT", T.PROGRAM_IMPORTANT, description="Orientation and first session"),
    _event("2026-03-14", "MT", T.PROGRAM_IMPORTANT, end="2026-03-15", description="Overnight team building"),
    _event("2026-03-23", "Industry collaboration project", T.PROGRAM, end="2026-04-09", description="Startup agent pipeline"),
    _event("2026-03-01", "Independence Movement Day", T.HOLIDAY),
    _event("2026-03-02", "Substitute holiday", T.HOLIDAY),
    _event("2026-03-03", "First day of classes", T.ACADEMIC, description="Spring 2026 semester starts"),
    _event("2026-03-05", "Registration change period", T.ACADEMIC, end="2026-03-09"),
    _event("2026-03-12", "Late registration", T.ACADEMIC, end="2026-03-16"),
    # ========== April ==========
    _event("2026-04-13", "Industry project presentations", T.PROGRAM_IMPORTANT, description="Presentations and retrospective"),
    _event("2026-04-08", "One-third of semester", T.DEADLINE),
    _event("2026-04-14", "Course withdrawal period", T.DEADLINE, end="2026-04-16"),
    _event("2026-04-21", "Midterm exams", T.EXAM, end="2026-04-27", description="Midterm exam period"),
    # ========== May ==========
    _event("2026-05-04", "Guest speaker #1", T.PROGRAM_IMPORTANT, description="AI expert (technical foundations)"),
    _event("2026-05-18", "Guest speaker #2", T.PROGRAM_IMPORTANT, description="Startup founder (tech to business)"),
    _event("2026-05-05", "Children's Day", T.HOLIDAY),
    _event("2026-05-23", "Buddha's Birthday", T.HOLIDAY),
    _event("2026-05-24", "Buddha's Birthday (Sun)", T.HOLIDAY),
    _event("2026-05-25", "Substitute holiday", T.HOLIDAY),
    _event("2026-05-15", "Two-thirds of semester", T.DEADLINE),
    # ========== June ==========
    _event("2026-06-01", "Guest speaker #3", T.PROGRAM_IMPORTANT, description="VC (investor perspective)"),
    _event("2026-06-03", "Local elections", T.HOLIDAY, description="Temporary public holiday"),
    _event("2026-06-06", "Memorial Day", T.HOLIDAY, description="Saturday, no substitute holiday"),
    _event("2026-06-16", "Final exams", T.EXAM, end="2026-06-22", description="Final exam period"),
    _event("2026-06-23", "Summer vacation begins", T.VACATION),
    _event("2026-06-29", "Grade submission deadline", T.DEADLINE),
    # ========== July ==========
    _event("2026-07-06", "Final Sprint", T.PROGRAM, end="2026-08-01", description="Final project sprint"),
    _event("2026-07-09", "Guest speaker #4", T.PROGRAM_IMPORTANT, description="AI expert (advanced topics)"),
    _event("2026-07-20", "Guest speaker #5", T.PROGRAM_IMPORTANT, description="Startup founder (field insights)"),
    _event("2026-07-27", "Guest speaker #6", T.PROGRAM_IMPORTANT, description="VC (pitching perspective)"),
    _event("2026-07-15", "Chobok", T.HOLIDAY),
    _event("2026-07-25", "Jungbok", T.HOLIDAY),
    # ========== August ==========
    _event("2026-08-01", "Cohort 5 demo day", T.PROGRAM_IMPORTANT, description="Final presentations and demos"),
    _event("2026-08-03", "Fall leave-of-absence applications open", T.ACADEMIC),
    _event("2026-08-10", "Fall course registration", T.ACADEMIC, end="2026-08-14"),
    _event("2026-08-14", "Malbok", T.HOLIDAY),
    _event("2026-08-15", "Liberation Day", T.HOLIDAY),
    _event("2026-08-17", "Substitute holiday", T.HOLIDAY),
    _event("2026-08-21", "Fall tuition payment", T.ACADEMIC, end="2026-08-27"),
    _event("2026-08-28", "Commencement", T.ACADEMIC),
)

# Sessions first, then fixed entries, matching the order the UI lists them
EVENTS: tuple[CalendarEvent, ...] = tuple(generate_session_events()) + FIXED_EVENTS

CATALOG_MONTHS: tuple[CatalogMonth, ...] = tuple(
    CatalogMonth(year=2026, month=month, name=calendar.month_name[month])
    for month in range(2, 9)
)


def list_events_on_date(day: date | str) -> list[CalendarEvent]:
    """
    Return every catalog entry that falls on ``day``.

    Range entries match when ``day`` lies within [date, end_date], both ends
    inclusive. Results keep catalog order.
    """
    if isinstance(day, str):
        day = date.fromisoformat(day)
    return [event for event in EVENTS if event.occurs_on(day)]


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def first_weekday_of_month(year: int, month: int) -> int:
    """Weekday of the first of the month, 0 = Sunday."""
    # date.weekday() is Monday-based
    return (date(year, month, 1).weekday() + 1) % 7
