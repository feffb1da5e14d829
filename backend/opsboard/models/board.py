"""
Aggregate read models for the milestone panel and the dashboard overview.
"""

from __future__ import annotations

import datetime as dt

from pydantic import Field

from opsboard.models.common import CamelModel
from opsboard.models.milestone import Milestone
from opsboard.models.todo import Todo


class MilestoneWithTodos(Milestone):
    """Milestone with its root todos, each carrying two levels of children."""

    todos: list[Todo] = Field(default_factory=list)


class MilestoneProgress(CamelModel):
    """Completion summary of one milestone's root todos."""

    milestone_id: str
    title: str
    date: dt.date
    event_type: str
    color: str
    days_until: int
    total: int
    done: int
    percent: int


class UrgentTodo(CamelModel):
    """Open todo surfaced on the dashboard, with its milestone context."""

    todo: Todo
    milestone_id: str
    milestone_title: str
    days_until: int


class TodoStats(CamelModel):
    """Status counts over a flattened todo tree."""

    total: int = 0
    done: int = 0
    in_progress: int = 0
    todo: int = 0
    cancelled: int = 0


class DashboardOverview(CamelModel):
    """Everything the operations dashboard renders above the fold."""

    today: dt.date
    upcoming: list[MilestoneProgress] = Field(default_factory=list)
    past: list[MilestoneProgress] = Field(default_factory=list)
    urgent_todos: list[UrgentTodo] = Field(default_factory=list)
    stats: TodoStats = Field(default_factory=TodoStats)
