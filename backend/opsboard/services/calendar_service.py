"""
Month calendar grids built from the static event catalog.

The catalog has no HTTP route; the UI layer renders its calendar view by
calling build_month and list_months in process.
"""

from datetime import date

from opsboard.data.calendar_data import (
    CATALOG_MONTHS,
    days_in_month,
    first_weekday_of_month,
    list_events_on_date,
)
from opsboard.models.calendar import CalendarMonth, DayCell
from opsboard.models.enums import CalendarEventType

SUNDAY = 0
SATURDAY = 6


def build_day_cell(day: date) -> DayCell:
    """Build the cell for one calendar day with its events and highlight flags."""
    events = list_events_on_date(day)
    day_of_week = (day.weekday() + 1) % 7
    types = {event.type for event in events}
    return DayCell(
        day=day.day,
        date=day,
        events=events,
        day_of_week=day_of_week,
        is_weekend=day_of_week in (SUNDAY, SATURDAY),
        has_holiday=CalendarEventType.HOLIDAY in types,
        has_program=CalendarEventType.PROGRAM in types,
        has_program_important=CalendarEventType.PROGRAM_IMPORTANT in types,
    )


def build_month(year: int, month: int, name: str | None = None) -> CalendarMonth:
    """
    Build a Sunday-first month grid.

    The grid starts with blank cells so that day 1 lands under its weekday
    column, followed by one cell per day.
    """
    first_day = first_weekday_of_month(year, month)
    cells = [DayCell(day_of_week=index) for index in range(first_day)]
    cells.extend(
        build_day_cell(date(year, month, day))
        for day in range(1, days_in_month(year, month) + 1)
    )
    return CalendarMonth(
        year=year,
        month=month,
        name=name or date(year, month, 1).strftime("%B"),
        cells=cells,
    )


def list_months() -> list[CalendarMonth]:
    """Build grids for every month the catalog covers."""
    return [build_month(m.year, m.month, m.name) for m in CATALOG_MONTHS]
