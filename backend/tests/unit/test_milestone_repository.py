"""
Unit tests for Milestone repository.
"""

from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from opsboard.core.exceptions import NotFoundError
from opsboard.models.enums import TodoStatus
from opsboard.models.milestone import MilestoneCreate, MilestoneUpdate
from opsboard.models.todo import TodoCreate, TodoUpdate


def _milestone(title="Demo Day", day="2026-08-01", event_type="demo-day", **kwargs) -> MilestoneCreate:
    return MilestoneCreate(title=title, date=day, event_type=event_type, **kwargs)


@pytest.mark.asyncio
async def test_create_milestone_defaults_color(milestone_repo):
    """Test creating a milestone without a color."""
    milestone = await milestone_repo.create(_milestone())

    assert milestone.id
    assert milestone.title == "Demo Day"
    assert milestone.date == date(2026, 8, 1)
    assert milestone.event_type == "demo-day"
    assert milestone.color == "#14b8a6"
    assert milestone.created_at is not None


@pytest.mark.asyncio
async def test_create_milestone_accepts_any_event_type(milestone_repo):
    """The store does not restrict event types to the UI's known set."""
    milestone = await milestone_repo.create(_milestone(event_type="retro", color="#000000"))

    assert milestone.event_type == "retro"
    assert milestone.color == "#000000"


def test_milestone_create_requires_fields():
    """Missing or blank required fields are rejected."""
    with pytest.raises(PydanticValidationError):
        MilestoneCreate(title="", date="2026-08-01", event_type="demo-day")
    with pytest.raises(PydanticValidationError):
        MilestoneCreate(title="Demo Day", event_type="demo-day")
    with pytest.raises(PydanticValidationError):
        MilestoneCreate(title="Demo Day", date="2026-08-01", event_type="  ")


def test_milestone_create_parses_timestamp_to_date():
    milestone = MilestoneCreate(title="OT", date="2026-03-09T00:00:00.000Z", event_type="ot")

    assert milestone.date == date(2026, 3, 9)


@pytest.mark.asyncio
async def test_list_milestones_sorted_by_date(milestone_repo):
    """Test listing milestones orders them by date ascending."""
    await milestone_repo.create(_milestone(title="Demo Day", day="2026-08-01"))
    await milestone_repo.create(_milestone(title="OT", day="2026-03-09", event_type="ot"))
    await milestone_repo.create(_milestone(title="MT", day="2026-03-14", event_type="mt"))

    milestones = await milestone_repo.list()

    assert [m.title for m in milestones] == ["OT", "MT", "Demo Day"]
    assert all(m.todos == [] for m in milestones)


@pytest.mark.asyncio
async def test_list_milestones_nests_three_levels(milestone_repo, todo_repo):
    """Root, child and grandchild are returned; deeper todos are not."""
    milestone = await milestone_repo.create(_milestone())
    root = await todo_repo.create(TodoCreate(title="Root", milestone_id=milestone.id))
    child = await todo_repo.create(TodoCreate(title="Child", parent_id=root.id))
    grandchild = await todo_repo.create(TodoCreate(title="Grandchild", parent_id=child.id))
    await todo_repo.create(TodoCreate(title="Great-grandchild", parent_id=grandchild.id))

    [listed] = await milestone_repo.list()

    assert [t.title for t in listed.todos] == ["Root"]
    [listed_child] = listed.todos[0].children
    assert listed_child.title == "Child"
    [listed_grandchild] = listed_child.children
    assert listed_grandchild.title == "Grandchild"
    assert listed_grandchild.children == []


@pytest.mark.asyncio
async def test_milestone_todos_are_root_only_and_ordered(milestone_repo, todo_repo):
    milestone = await milestone_repo.create(_milestone())
    second = await todo_repo.create(TodoCreate(title="Second", milestone_id=milestone.id, order=5))
    first = await todo_repo.create(TodoCreate(title="First", milestone_id=milestone.id, order=1))
    # Child attached to the milestone too, but only reachable through its parent
    await todo_repo.create(TodoCreate(title="Nested", milestone_id=milestone.id, parent_id=first.id))

    fetched = await milestone_repo.get(milestone.id)

    assert [t.id for t in fetched.todos] == [first.id, second.id]
    assert [c.title for c in fetched.todos[0].children] == ["Nested"]


@pytest.mark.asyncio
async def test_get_milestone_not_found(milestone_repo):
    with pytest.raises(NotFoundError):
        await milestone_repo.get("nonexistent")


@pytest.mark.asyncio
async def test_update_milestone_only_changes_supplied_fields(milestone_repo):
    """Test updating a milestone."""
    created = await milestone_repo.create(_milestone(description="Final demos", color="#ec4899"))

    updated = await milestone_repo.update(created.id, MilestoneUpdate(title="Demo Day 2026"))

    assert updated.title == "Demo Day 2026"
    assert updated.description == "Final demos"
    assert updated.color == "#ec4899"
    assert updated.date == created.date
    assert updated.event_type == created.event_type


@pytest.mark.asyncio
async def test_update_milestone_clears_description_with_null(milestone_repo):
    created = await milestone_repo.create(_milestone(description="Final demos"))

    updated = await milestone_repo.update(created.id, MilestoneUpdate(description=None))

    assert updated.description is None


@pytest.mark.asyncio
async def test_update_milestone_ignores_null_required_fields(milestone_repo):
    created = await milestone_repo.create(_milestone())

    updated = await milestone_repo.update(
        created.id,
        MilestoneUpdate(title=None, event_type="", date="2026-08-02"),
    )

    assert updated.title == "Demo Day"
    assert updated.event_type == "demo-day"
    assert updated.date == date(2026, 8, 2)


@pytest.mark.asyncio
async def test_update_milestone_not_found(milestone_repo):
    with pytest.raises(NotFoundError):
        await milestone_repo.update("missing", MilestoneUpdate(title="x"))


@pytest.mark.asyncio
async def test_delete_milestone_detaches_todos(milestone_repo, todo_repo):
    """Deleting a milestone keeps its todos with milestone_id cleared."""
    milestone = await milestone_repo.create(_milestone())
    root = await todo_repo.create(TodoCreate(title="Prep slides", milestone_id=milestone.id))
    child = await todo_repo.create(
        TodoCreate(title="Team decks", milestone_id=milestone.id, parent_id=root.id)
    )

    await milestone_repo.delete(milestone.id)

    with pytest.raises(NotFoundError):
        await milestone_repo.get(milestone.id)
    kept_root = await todo_repo.get(root.id)
    kept_child = await todo_repo.get(child.id)
    assert kept_root.milestone_id is None
    assert kept_root.milestone is None
    assert kept_child.milestone_id is None
    assert kept_child.parent_id == root.id


@pytest.mark.asyncio
async def test_delete_milestone_not_found(milestone_repo):
    with pytest.raises(NotFoundError):
        await milestone_repo.delete("missing")


@pytest.mark.asyncio
async def test_milestone_tree_reflects_todo_status(milestone_repo, todo_repo):
    milestone = await milestone_repo.create(_milestone())
    todo = await todo_repo.create(TodoCreate(title="Prep slides", milestone_id=milestone.id))
    await todo_repo.update(todo.id, TodoUpdate(status=TodoStatus.DONE))

    fetched = await milestone_repo.get(milestone.id)

    assert fetched.todos[0].status == TodoStatus.DONE
    assert fetched.todos[0].completed_at is not None
