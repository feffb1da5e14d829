"""
ORM to Pydantic conversion for milestones and todos.

Conversion walks relationships explicitly with a depth budget so that only
eagerly loaded collections are touched. Accessing an unloaded relationship on
an AsyncSession would trigger implicit IO.
"""

from __future__ import annotations

from opsboard.infrastructure.local.database import MilestoneORM, TodoORM
from opsboard.models.board import MilestoneWithTodos
from opsboard.models.enums import TodoPriority, TodoStatus
from opsboard.models.milestone import Milestone
from opsboard.models.todo import Todo, TodoDetail
from opsboard.utils.datetime_utils import ensure_utc

# root -> child -> grandchild
CHILD_DEPTH = 2


def _milestone_fields(orm: MilestoneORM) -> dict:
    return {
        "id": orm.id,
        "title": orm.title,
        "description": orm.description,
        "date": orm.date,
        "event_type": orm.event_type,
        "color": orm.color,
        "created_at": ensure_utc(orm.created_at),
        "updated_at": ensure_utc(orm.updated_at),
    }


def _todo_fields(orm: TodoORM) -> dict:
    return {
        "id": orm.id,
        "title": orm.title,
        "description": orm.description,
        "status": TodoStatus(orm.status),
        "priority": TodoPriority(orm.priority),
        "deadline": orm.deadline,
        "order": orm.order,
        "milestone_id": orm.milestone_id,
        "parent_id": orm.parent_id,
        "completed_at": ensure_utc(orm.completed_at),
        "created_at": ensure_utc(orm.created_at),
        "updated_at": ensure_utc(orm.updated_at),
    }


def milestone_to_model(orm: MilestoneORM) -> Milestone:
    """Convert a milestone row without its todos."""
    return Milestone(**_milestone_fields(orm))


def todo_to_model(orm: TodoORM, depth: int = CHILD_DEPTH) -> Todo:
    """
    Convert a todo row with ``depth`` levels of children.

    depth=0 returns the todo with an empty children list.
    """
    children = []
    if depth > 0:
        children = [todo_to_model(child, depth - 1) for child in orm.children]
    return Todo(**_todo_fields(orm), children=children)


def todo_to_detail(orm: TodoORM) -> TodoDetail:
    """Convert a todo row with milestone, parent and two levels of children."""
    return TodoDetail(
        **_todo_fields(orm),
        children=[todo_to_model(child, CHILD_DEPTH - 1) for child in orm.children],
        milestone=milestone_to_model(orm.milestone) if orm.milestone else None,
        parent=todo_to_model(orm.parent, depth=0) if orm.parent else None,
    )


def milestone_to_board(orm: MilestoneORM) -> MilestoneWithTodos:
    """Convert a milestone row with its root todos and two levels of children."""
    return MilestoneWithTodos(
        **_milestone_fields(orm),
        todos=[todo_to_model(todo, CHILD_DEPTH) for todo in orm.root_todos],
    )
