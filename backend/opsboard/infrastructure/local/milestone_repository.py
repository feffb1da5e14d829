"""
SQLite implementation of Milestone repository.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import selectinload

from opsboard.core.exceptions import NotFoundError
from opsboard.core.logger import logger
from opsboard.infrastructure.local.database import (
    MilestoneORM,
    TodoORM,
    get_session_factory,
    session_scope,
)
from opsboard.infrastructure.local.mappers import milestone_to_board, milestone_to_model
from opsboard.interfaces.milestone_repository import IMilestoneRepository
from opsboard.models.board import MilestoneWithTodos
from opsboard.models.milestone import Milestone, MilestoneCreate, MilestoneUpdate
from opsboard.utils.datetime_utils import now_utc

# Fields that can be cleared with an explicit null on update
NULLABLE_MILESTONE_FIELDS = frozenset({"description"})


def _with_todo_tree():
    """Eager-load root todos -> children -> grandchildren."""
    return selectinload(MilestoneORM.root_todos).selectinload(TodoORM.children).selectinload(TodoORM.children)


class SqliteMilestoneRepository(IMilestoneRepository):
    """SQLite implementation of milestone repository."""

    def __init__(self, session_factory=None):
        """
        Initialize repository.

        Args:
            session_factory: Optional session factory (for testing)
        """
        self._session_factory = session_factory or get_session_factory()

    async def list(self) -> list[MilestoneWithTodos]:
        """List milestones by date with their todo trees."""
        async with session_scope(self._session_factory, "Failed to fetch milestones") as session:
            result = await session.execute(
                select(MilestoneORM)
                .options(_with_todo_tree())
                .order_by(MilestoneORM.date.asc(), MilestoneORM.created_at.asc())
            )
            return [milestone_to_board(orm) for orm in result.scalars().all()]

    async def get(self, milestone_id: str) -> MilestoneWithTodos:
        """Get a milestone with its todo tree."""
        async with session_scope(self._session_factory, "Failed to fetch milestone") as session:
            result = await session.execute(
                select(MilestoneORM)
                .where(MilestoneORM.id == milestone_id)
                .options(_with_todo_tree())
            )
            orm = result.scalar_one_or_none()
            if not orm:
                raise NotFoundError(f"Milestone {milestone_id} not found")
            return milestone_to_board(orm)

    async def create(self, milestone: MilestoneCreate) -> Milestone:
        """Create a new milestone."""
        async with session_scope(self._session_factory, "Failed to create milestone") as session:
            orm = MilestoneORM(
                title=milestone.title,
                description=milestone.description,
                date=milestone.date,
                event_type=milestone.event_type,
                color=milestone.color,
            )
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            logger.info(f"Created milestone {orm.id} ({orm.event_type} on {orm.date})")
            return milestone_to_model(orm)

    async def update(self, milestone_id: str, update: MilestoneUpdate) -> Milestone:
        """Update the supplied fields of a milestone."""
        async with session_scope(self._session_factory, "Failed to update milestone") as session:
            orm = await session.get(MilestoneORM, milestone_id)
            if not orm:
                raise NotFoundError(f"Milestone {milestone_id} not found")

            update_data = update.model_dump(exclude_unset=True)
            for field, value in update_data.items():
                if value is None and field not in NULLABLE_MILESTONE_FIELDS:
                    continue
                setattr(orm, field, value)

            orm.updated_at = now_utc()
            await session.commit()
            await session.refresh(orm)
            return milestone_to_model(orm)

    async def delete(self, milestone_id: str) -> None:
        """
        Delete a milestone.

        Also nullifies milestone_id on related todos; the todos themselves are kept.
        """
        async with session_scope(self._session_factory, "Failed to delete milestone") as session:
            orm = await session.get(MilestoneORM, milestone_id)
            if not orm:
                raise NotFoundError(f"Milestone {milestone_id} not found")

            # Nullify milestone_id on related todos before deleting
            await session.execute(
                update(TodoORM)
                .where(TodoORM.milestone_id == milestone_id)
                .values(milestone_id=None)
            )

            await session.delete(orm)
            await session.commit()
            logger.info(f"Deleted milestone {milestone_id}")
