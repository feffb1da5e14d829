"""
Milestone model definitions.

Milestones are dated events (demo day, interviews, deadlines...) that
organize zero or more todos.
"""

import datetime as dt
from typing import Optional

from pydantic import Field, field_validator

from opsboard.models.common import CamelModel
from opsboard.utils.datetime_utils import parse_calendar_date

DEFAULT_MILESTONE_COLOR = "#14b8a6"


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MilestoneBase(CamelModel):
    """Base milestone fields."""

    title: str = Field(..., min_length=1, max_length=200, description="Milestone title")
    description: Optional[str] = Field(None, max_length=2000, description="Milestone description")
    date: dt.date = Field(..., description="Calendar date of the event")
    event_type: str = Field(..., min_length=1, max_length=50, description="Free-form event tag")
    color: str = Field(DEFAULT_MILESTONE_COLOR, max_length=20, description="Hex display color")

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_calendar_date(value)


class MilestoneCreate(MilestoneBase):
    """Schema for creating a milestone."""

    @field_validator("title", "event_type", mode="before")
    @classmethod
    def _strip_required(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return _blank_to_none(value)

    @field_validator("color", mode="before")
    @classmethod
    def _default_color(cls, value):
        return _blank_to_none(value) or DEFAULT_MILESTONE_COLOR


class MilestoneUpdate(CamelModel):
    """
    Schema for updating a milestone.

    Only fields present in the payload are applied. ``description`` may be
    cleared with an explicit null; null or blank values for the other fields
    leave the stored value untouched.
    """

    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    date: Optional[dt.date] = None
    event_type: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=20)

    @field_validator("title", "event_type", "color", mode="before")
    @classmethod
    def _ignore_blank(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return _blank_to_none(value)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_calendar_date(value)


class Milestone(MilestoneBase):
    """Complete milestone model."""

    id: str
    created_at: dt.datetime
    updated_at: dt.datetime
