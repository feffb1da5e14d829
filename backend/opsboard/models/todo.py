"""
Todo model definitions.

Todos are units of work. A todo may hang off a milestone, off another todo
(as a child), both, or neither. Reads expose at most two levels of children
below the todo being returned.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field, field_validator

from opsboard.models.common import CamelModel
from opsboard.models.enums import TodoPriority, TodoStatus
from opsboard.models.milestone import Milestone
from opsboard.utils.datetime_utils import parse_calendar_date

# Fields that can be cleared with an explicit null on update
NULLABLE_TODO_FIELDS = frozenset({"description", "deadline", "milestone_id", "parent_id"})


class TodoBase(CamelModel):
    """Base todo fields shared across create/read."""

    title: str = Field(..., min_length=1, max_length=500, description="Todo title")
    description: Optional[str] = Field(None, max_length=5000, description="Details")
    status: TodoStatus = Field(TodoStatus.TODO, description="Workflow status")
    priority: TodoPriority = Field(TodoPriority.MEDIUM, description="Priority")
    deadline: Optional[dt.date] = Field(None, description="Due date")
    milestone_id: Optional[str] = Field(None, description="Owning milestone ID")
    parent_id: Optional[str] = Field(None, description="Parent todo ID (for child todos)")

    @field_validator("deadline", mode="before")
    @classmethod
    def _parse_deadline(cls, value):
        return parse_calendar_date(value)


class TodoCreate(TodoBase):
    """
    Schema for creating a todo.

    When ``order`` is omitted the repository appends the todo after its
    siblings.
    """

    order: Optional[int] = Field(None, description="Position among siblings")

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value):
        return value or TodoStatus.TODO

    @field_validator("priority", mode="before")
    @classmethod
    def _default_priority(cls, value):
        return value or TodoPriority.MEDIUM

    @field_validator("milestone_id", "parent_id", mode="before")
    @classmethod
    def _empty_id_to_none(cls, value):
        return value or None


class TodoUpdate(CamelModel):
    """
    Schema for updating a todo.

    Only fields present in the payload are applied. Fields listed in
    NULLABLE_TODO_FIELDS are cleared by an explicit null; a null for any
    other field is ignored.
    """

    title: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = Field(None, max_length=5000)
    status: Optional[TodoStatus] = None
    priority: Optional[TodoPriority] = None
    deadline: Optional[dt.date] = None
    milestone_id: Optional[str] = None
    parent_id: Optional[str] = None
    order: Optional[int] = None

    @field_validator("title", mode="before")
    @classmethod
    def _ignore_blank_title(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("deadline", mode="before")
    @classmethod
    def _parse_deadline(cls, value):
        return parse_calendar_date(value)

    @field_validator("milestone_id", "parent_id", mode="before")
    @classmethod
    def _empty_id_to_none(cls, value):
        return value or None


class Todo(TodoBase):
    """Complete todo model with nested children."""

    id: str
    order: int = 0
    completed_at: Optional[dt.datetime] = None
    created_at: dt.datetime
    updated_at: dt.datetime
    children: list[Todo] = Field(default_factory=list)


class TodoDetail(Todo):
    """Todo with its milestone and parent resolved."""

    milestone: Optional[Milestone] = None
    parent: Optional[Todo] = None


Todo.model_rebuild()
TodoDetail.model_rebuild()
