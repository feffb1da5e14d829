"""
Calendar model definitions.

The event catalog is static configuration; these models describe catalog
entries and the month grids built from them.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from opsboard.models.enums import CalendarEventType


class CalendarEvent(BaseModel):
    """A single-day or date-range catalog entry."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    end_date: Optional[dt.date] = Field(None, description="Inclusive end of a range event")
    title: str
    type: CalendarEventType
    description: Optional[str] = None

    def occurs_on(self, day: dt.date) -> bool:
        """Check whether the entry covers ``day`` (range ends inclusive)."""
        if self.end_date is not None:
            return self.date <= day <= self.end_date
        return self.date == day


class CatalogMonth(BaseModel):
    """A month covered by the catalog."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    name: str


class DayCell(BaseModel):
    """One cell of a month grid. Leading alignment cells have no day."""

    day: Optional[int] = None
    date: Optional[dt.date] = None
    events: list[CalendarEvent] = Field(default_factory=list)
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday")
    is_weekend: bool = False
    has_holiday: bool = False
    has_program: bool = False
    has_program_important: bool = False


class CalendarMonth(BaseModel):
    """Month grid ready for rendering, Sunday-first."""

    year: int
    month: int
    name: str
    cells: list[DayCell] = Field(default_factory=list)
