"""
Seed demo milestones and todos from the program's key calendar events.

Usage:
    cd backend
    python -m scripts.seed_demo_data          # Dry-run (shows what will be created)
    python -m scripts.seed_demo_data --apply   # Actually insert data

Requires: ENVIRONMENT=local in .env
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

# Suppress noisy SQLAlchemy logs during seed
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine.Engine").setLevel(logging.WARNING)

# Ensure backend root is on sys.path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from opsboard.data.calendar_data import EVENTS
from opsboard.infrastructure.local.database import get_session_factory, init_db
from opsboard.infrastructure.local.milestone_repository import SqliteMilestoneRepository
from opsboard.infrastructure.local.todo_repository import SqliteTodoRepository
from opsboard.models.calendar import CalendarEvent
from opsboard.models.enums import CalendarEventType, MilestoneEventType, TodoPriority
from opsboard.models.milestone import MilestoneCreate
from opsboard.models.todo import TodoCreate

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EVENT_TYPE_BY_TITLE = {
    "Cohort 5 interviews": MilestoneEventType.INTERVIEW,
    "OT": MilestoneEventType.OT,
    "MT": MilestoneEventType.MT,
    "Industry project presentations": MilestoneEventType.DEADLINE,
    "Cohort 5 demo day": MilestoneEventType.DEMO_DAY,
}

COLOR_BY_EVENT_TYPE = {
    MilestoneEventType.INTERVIEW: "#8b5cf6",
    MilestoneEventType.OT: "#f59e0b",
    MilestoneEventType.MT: "#10b981",
    MilestoneEventType.DEADLINE: "#ef4444",
    MilestoneEventType.DEMO_DAY: "#ec4899",
    MilestoneEventType.SESSION: "#14b8a6",
}

# Root todo -> child todos, per milestone type
TODO_TEMPLATES: dict[MilestoneEventType, list[tuple[str, TodoPriority, list[str]]]] = {
    MilestoneEventType.INTERVIEW: [
        ("Book interview rooms", TodoPriority.HIGH, []),
        ("Prepare question sheet", TodoPriority.MEDIUM, ["Technical questions", "Culture questions"]),
    ],
    MilestoneEventType.OT: [
        ("Orientation slides", TodoPriority.HIGH, ["Program overview", "Schedule walkthrough"]),
        ("Order snacks", TodoPriority.LOW, []),
    ],
    MilestoneEventType.MT: [
        ("Reserve lodging", TodoPriority.URGENT, []),
        ("Team building program", TodoPriority.MEDIUM, ["Icebreakers", "Team assignment"]),
    ],
    MilestoneEventType.DEADLINE: [
        ("Collect project reports", TodoPriority.HIGH, []),
    ],
    MilestoneEventType.DEMO_DAY: [
        ("Prep slides", TodoPriority.URGENT, ["Team decks", "Opening deck"]),
        ("Venue and AV check", TodoPriority.HIGH, []),
        ("Invite guests", TodoPriority.MEDIUM, ["Investors", "Alumni"]),
    ],
    MilestoneEventType.SESSION: [
        ("Confirm speaker logistics", TodoPriority.HIGH, []),
    ],
}


@dataclass
class SeedTodo:
    title: str
    priority: TodoPriority
    children: list[str] = field(default_factory=list)


@dataclass
class SeedMilestone:
    create: MilestoneCreate
    todos: list[SeedTodo] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Data definitions
# ---------------------------------------------------------------------------
def _milestone_for(event: CalendarEvent) -> SeedMilestone:
    event_type = EVENT_TYPE_BY_TITLE.get(event.title, MilestoneEventType.SESSION)
    create = MilestoneCreate(
        title=event.title,
        description=event.description,
        date=event.date,
        event_type=event_type.value,
        color=COLOR_BY_EVENT_TYPE[event_type],
    )
    todos = [
        SeedTodo(title=title, priority=priority, children=list(children))
        for title, priority, children in TODO_TEMPLATES[event_type]
    ]
    return SeedMilestone(create=create, todos=todos)


def build_seed_plan(events: tuple[CalendarEvent, ...] = EVENTS) -> list[SeedMilestone]:
    """One milestone per key program event, in catalog order."""
    return [
        _milestone_for(event)
        for event in events
        if event.type == CalendarEventType.PROGRAM_IMPORTANT
    ]


# ---------------------------------------------------------------------------
# Seed
# ---------------------------------------------------------------------------
async def seed(dry_run: bool = True) -> None:
    plan = build_seed_plan()

    if dry_run:
        print("=" * 60)
        print("  DRY RUN - showing what will be created")
        print("=" * 60)
        for item in plan:
            print(f"\n{item.create.date}  {item.create.title} ({item.create.event_type})")
            for todo in item.todos:
                print(f"  - {todo.title} [{todo.priority.value}]")
                for child in todo.children:
                    print(f"      - {child}")
        print(f"\nMilestones ({len(plan)})")
        print("\n→ run with --apply to insert")
        return

    await init_db()
    session_factory = get_session_factory()
    milestone_repo = SqliteMilestoneRepository(session_factory=session_factory)
    todo_repo = SqliteTodoRepository(session_factory=session_factory)

    print("\n--- Creating Milestones ---")
    for item in plan:
        milestone = await milestone_repo.create(item.create)
        print(f"  [OK] {milestone.title:35s} id={milestone.id}")
        for todo in item.todos:
            root = await todo_repo.create(
                TodoCreate(title=todo.title, priority=todo.priority, milestone_id=milestone.id)
            )
            for child in todo.children:
                await todo_repo.create(
                    TodoCreate(title=child, milestone_id=milestone.id, parent_id=root.id)
                )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Seed demo milestones and todos for the operations dashboard."
    )
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Actually insert data. Default is dry-run.",
    )
    args = parser.parse_args()
    asyncio.run(seed(dry_run=not args.apply))


if __name__ == "__main__":
    main()
