"""
Tests for the demo data seed plan.
"""

from datetime import date

import pytest

from opsboard.models.enums import MilestoneEventType
from scripts.seed_demo_data import build_seed_plan, seed


def test_seed_plan_has_one_milestone_per_key_event():
    plan = build_seed_plan()

    assert len(plan) == 11
    assert plan[0].create.title == "Cohort 5 interviews"
    assert plan[-1].create.title == "Cohort 5 demo day"
    assert plan[-1].create.date == date(2026, 8, 1)


def test_seed_plan_maps_event_types_and_colors():
    by_title = {item.create.title: item for item in build_seed_plan()}

    demo_day = by_title["Cohort 5 demo day"]
    assert demo_day.create.event_type == MilestoneEventType.DEMO_DAY.value
    assert demo_day.create.color == "#ec4899"
    assert [todo.title for todo in demo_day.todos] == [
        "Prep slides",
        "Venue and AV check",
        "Invite guests",
    ]

    speaker = by_title["Guest speaker #1"]
    assert speaker.create.event_type == MilestoneEventType.SESSION.value
    assert speaker.create.color == "#14b8a6"


@pytest.mark.asyncio
async def test_seed_dry_run_prints_plan(capsys):
    await seed(dry_run=True)

    out = capsys.readouterr().out
    assert "DRY RUN" in out
    assert "Cohort 5 demo day (demo-day)" in out
    assert "Milestones (11)" in out
