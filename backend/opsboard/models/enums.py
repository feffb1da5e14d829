"""
Enum definitions for the application.

These enums are used across models and provide type-safe status/priority values.
"""

from enum import Enum


class TodoStatus(str, Enum):
    """Todo status. Every state can move to every other state."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class TodoPriority(str, Enum):
    """Todo priority, most pressing first."""

    URGENT = "URGENT"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


# Sort rank used when ordering open work (lower is more pressing)
PRIORITY_RANK: dict[TodoPriority, int] = {
    TodoPriority.URGENT: 0,
    TodoPriority.HIGH: 1,
    TodoPriority.MEDIUM: 2,
    TodoPriority.LOW: 3,
}


class MilestoneEventType(str, Enum):
    """
    Event types the dashboard UI knows how to style.

    Milestones store event_type as a free-form string; these are only the
    recognized values.
    """

    RECRUITING = "recruiting"
    INTERVIEW = "interview"
    OT = "ot"
    MT = "mt"
    SESSION = "session"
    DEMO_DAY = "demo-day"
    DEADLINE = "deadline"


class CalendarEventType(str, Enum):
    """Type tag of a static calendar entry."""

    HOLIDAY = "holiday"
    ACADEMIC = "academic"
    EXAM = "exam"
    VACATION = "vacation"
    DEADLINE = "deadline"
    PROGRAM = "program"
    PROGRAM_IMPORTANT = "program-important"
    SESSION = "session"
