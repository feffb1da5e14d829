"""
Dashboard aggregates over the milestones-with-todos tree.

These are pure functions over the data returned by the milestone
repository; the dashboard re-fetches that tree after every mutation and
recomputes everything here instead of patching state.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, Optional

from opsboard.models.board import (
    DashboardOverview,
    MilestoneProgress,
    MilestoneWithTodos,
    TodoStats,
    UrgentTodo,
)
from opsboard.models.enums import PRIORITY_RANK, TodoStatus
from opsboard.models.todo import Todo

URGENT_TODO_LIMIT = 5

CLOSED_STATUSES = frozenset({TodoStatus.DONE, TodoStatus.CANCELLED})


def days_until(target: date, today: date) -> int:
    """Whole days from today to target (negative when target is past)."""
    return (target - today).days


def is_overdue(deadline: Optional[date], today: date) -> bool:
    """Check whether a deadline has passed."""
    if deadline is None:
        return False
    return days_until(deadline, today) < 0


def flatten_todos(todos: Iterable[Todo]) -> Iterator[Todo]:
    """Yield todos depth-first, each followed by its children."""
    for todo in todos:
        yield todo
        yield from flatten_todos(todo.children)


def milestone_progress(milestone: MilestoneWithTodos, today: date) -> MilestoneProgress:
    """Completion of a milestone's root todos."""
    total = len(milestone.todos)
    done = sum(1 for todo in milestone.todos if todo.status == TodoStatus.DONE)
    percent = round(done / total * 100) if total else 0
    return MilestoneProgress(
        milestone_id=milestone.id,
        title=milestone.title,
        date=milestone.date,
        event_type=milestone.event_type,
        color=milestone.color,
        days_until=days_until(milestone.date, today),
        total=total,
        done=done,
        percent=percent,
    )


def split_milestones(
    milestones: Iterable[MilestoneWithTodos],
    today: date,
) -> tuple[list[MilestoneWithTodos], list[MilestoneWithTodos]]:
    """Split milestones into (upcoming, past); today counts as upcoming."""
    upcoming: list[MilestoneWithTodos] = []
    past: list[MilestoneWithTodos] = []
    for milestone in milestones:
        if days_until(milestone.date, today) >= 0:
            upcoming.append(milestone)
        else:
            past.append(milestone)
    return upcoming, past


def collect_urgent_todos(
    milestones: Iterable[MilestoneWithTodos],
    today: date,
    limit: int = URGENT_TODO_LIMIT,
) -> list[UrgentTodo]:
    """
    Open todos at any depth, soonest milestone first, then by priority.

    Ties keep tree order (the sort is stable).
    """
    candidates: list[UrgentTodo] = []
    for milestone in milestones:
        remaining = days_until(milestone.date, today)
        for todo in flatten_todos(milestone.todos):
            if todo.status in CLOSED_STATUSES:
                continue
            candidates.append(
                UrgentTodo(
                    todo=todo,
                    milestone_id=milestone.id,
                    milestone_title=milestone.title,
                    days_until=remaining,
                )
            )
    candidates.sort(key=lambda item: (item.days_until, PRIORITY_RANK[item.todo.priority]))
    return candidates[:limit]


def todo_stats(todos: Iterable[Todo]) -> TodoStats:
    """Count statuses over the flattened todo tree."""
    stats = TodoStats()
    for todo in flatten_todos(todos):
        stats.total += 1
        if todo.status == TodoStatus.DONE:
            stats.done += 1
        elif todo.status == TodoStatus.IN_PROGRESS:
            stats.in_progress += 1
        elif todo.status == TodoStatus.TODO:
            stats.todo += 1
        else:
            stats.cancelled += 1
    return stats


def build_overview(milestones: list[MilestoneWithTodos], today: date) -> DashboardOverview:
    """Assemble the dashboard overview for ``today``."""
    upcoming, past = split_milestones(milestones, today)
    all_todos = [todo for milestone in milestones for todo in milestone.todos]
    return DashboardOverview(
        today=today,
        upcoming=[milestone_progress(m, today) for m in upcoming],
        past=[milestone_progress(m, today) for m in past],
        urgent_todos=collect_urgent_todos(milestones, today),
        stats=todo_stats(all_todos),
    )
