"""Pydantic models (schemas) for the application."""

from opsboard.models.board import (
    DashboardOverview,
    MilestoneProgress,
    MilestoneWithTodos,
    TodoStats,
    UrgentTodo,
)
from opsboard.models.calendar import CalendarEvent, CalendarMonth, CatalogMonth, DayCell
from opsboard.models.common import CamelModel, SuccessResponse
from opsboard.models.enums import CalendarEventType, MilestoneEventType, TodoPriority, TodoStatus
from opsboard.models.milestone import Milestone, MilestoneCreate, MilestoneUpdate
from opsboard.models.todo import Todo, TodoCreate, TodoDetail, TodoUpdate

__all__ = [
    # Enums
    "TodoStatus",
    "TodoPriority",
    "MilestoneEventType",
    "CalendarEventType",
    # Base
    "CamelModel",
    "SuccessResponse",
    # Milestone
    "Milestone",
    "MilestoneCreate",
    "MilestoneUpdate",
    "MilestoneWithTodos",
    # Todo
    "Todo",
    "TodoCreate",
    "TodoUpdate",
    "TodoDetail",
    # Dashboard
    "MilestoneProgress",
    "UrgentTodo",
    "TodoStats",
    "DashboardOverview",
    # Calendar
    "CalendarEvent",
    "CatalogMonth",
    "DayCell",
    "CalendarMonth",
]
