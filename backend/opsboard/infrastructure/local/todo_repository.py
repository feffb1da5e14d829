"""
SQLite implementation of Todo repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import case, delete, func, literal, select
from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from opsboard.core.exceptions import NotFoundError, ValidationError
from opsboard.core.logger import logger
from opsboard.infrastructure.local.database import (
    MilestoneORM,
    TodoORM,
    get_session_factory,
    session_scope,
)
from opsboard.infrastructure.local.mappers import todo_to_detail
from opsboard.interfaces.todo_repository import ITodoRepository
from opsboard.models.enums import TodoStatus
from opsboard.models.todo import NULLABLE_TODO_FIELDS, TodoCreate, TodoDetail, TodoUpdate
from opsboard.utils.datetime_utils import now_utc


def _detail_options():
    """Eager-load milestone, parent and two levels of children."""
    return (
        selectinload(TodoORM.milestone),
        selectinload(TodoORM.parent),
        selectinload(TodoORM.children).selectinload(TodoORM.children),
    )


def completed_at_for(new_status):
    """
    SQL value of completed_at when status is set to ``new_status``.

    Entering DONE stamps the current time, DONE to DONE keeps the stored
    value, and any other status clears it. The comparison runs against the
    row being updated, so status and completed_at always change together.
    """
    if TodoStatus(new_status) != TodoStatus.DONE:
        return None
    return case(
        (TodoORM.status == TodoStatus.DONE.value, TodoORM.completed_at),
        else_=literal(now_utc(), TodoORM.completed_at.type),
    )


class SqliteTodoRepository(ITodoRepository):
    """SQLite implementation of todo repository."""

    def __init__(self, session_factory=None):
        """
        Initialize repository.

        Args:
            session_factory: Optional session factory (for testing)
        """
        self._session_factory = session_factory or get_session_factory()

    async def _load_detail(self, session: AsyncSession, todo_id: str) -> Optional[TodoORM]:
        result = await session.execute(
            select(TodoORM)
            .where(TodoORM.id == todo_id)
            .options(*_detail_options())
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _ensure_milestone(self, session: AsyncSession, milestone_id: str) -> None:
        if await session.get(MilestoneORM, milestone_id) is None:
            raise NotFoundError(f"Milestone {milestone_id} not found")

    async def _ensure_parent(self, session: AsyncSession, parent_id: str, todo_id: str | None = None) -> None:
        """Check the parent exists and is not the todo itself or one of its descendants."""
        current_id: str | None = parent_id
        first = True
        while current_id is not None:
            if todo_id is not None and current_id == todo_id:
                raise ValidationError("A todo cannot be nested under itself or its descendants")
            row = await session.execute(select(TodoORM.parent_id).where(TodoORM.id == current_id))
            found = row.one_or_none()
            if found is None:
                if first:
                    raise NotFoundError(f"Parent todo {parent_id} not found")
                break
            first = False
            current_id = found.parent_id

    async def _next_order(
        self,
        session: AsyncSession,
        parent_id: Optional[str],
        milestone_id: Optional[str],
    ) -> int:
        """Return max(order) + 1 among siblings, or 0 for an empty scope."""
        query = select(func.max(TodoORM.order))
        if parent_id:
            query = query.where(TodoORM.parent_id == parent_id)
        else:
            query = query.where(TodoORM.parent_id.is_(None))
            if milestone_id:
                query = query.where(TodoORM.milestone_id == milestone_id)
            else:
                query = query.where(TodoORM.milestone_id.is_(None))
        max_order = (await session.execute(query)).scalar()
        return 0 if max_order is None else max_order + 1

    async def list(
        self,
        milestone_id: Optional[str] = None,
        status: Optional[TodoStatus] = None,
        parent_id: Optional[str] = None,
        root_only: bool = False,
    ) -> list[TodoDetail]:
        """List todos with optional filters."""
        async with session_scope(self._session_factory, "Failed to fetch todos") as session:
            query = select(TodoORM).options(*_detail_options())

            if milestone_id:
                query = query.where(TodoORM.milestone_id == milestone_id)

            if status:
                query = query.where(TodoORM.status == TodoStatus(status).value)

            if root_only:
                query = query.where(TodoORM.parent_id.is_(None))
            elif parent_id:
                query = query.where(TodoORM.parent_id == parent_id)

            query = query.order_by(TodoORM.order.asc(), TodoORM.created_at.desc())

            result = await session.execute(query)
            return [todo_to_detail(orm) for orm in result.scalars().all()]

    async def get(self, todo_id: str) -> TodoDetail:
        """Get a todo by ID."""
        async with session_scope(self._session_factory, "Failed to fetch todo") as session:
            orm = await self._load_detail(session, todo_id)
            if not orm:
                raise NotFoundError(f"Todo {todo_id} not found")
            return todo_to_detail(orm)

    async def create(self, todo: TodoCreate) -> TodoDetail:
        """Create a new todo."""
        async with session_scope(self._session_factory, "Failed to create todo") as session:
            if todo.milestone_id:
                await self._ensure_milestone(session, todo.milestone_id)
            if todo.parent_id:
                await self._ensure_parent(session, todo.parent_id)

            order = todo.order
            if order is None:
                order = await self._next_order(session, todo.parent_id, todo.milestone_id)

            orm = TodoORM(
                title=todo.title,
                description=todo.description,
                status=todo.status.value,
                priority=todo.priority.value,
                deadline=todo.deadline,
                milestone_id=todo.milestone_id,
                parent_id=todo.parent_id,
                order=order,
                completed_at=now_utc() if todo.status == TodoStatus.DONE else None,
            )
            session.add(orm)
            await session.commit()

            created = await self._load_detail(session, orm.id)
            logger.info(f"Created todo {orm.id} (parent={orm.parent_id}, milestone={orm.milestone_id}, order={order})")
            return todo_to_detail(created)

    async def update(self, todo_id: str, update: TodoUpdate) -> TodoDetail:
        """
        Update the supplied fields of a todo.

        A status change is written with a single UPDATE that sets status and
        completed_at together, deriving completed_at from the status stored
        at write time rather than the one read earlier in this call.
        """
        async with session_scope(self._session_factory, "Failed to update todo") as session:
            result = await session.execute(
                select(TodoORM).where(TodoORM.id == todo_id).with_for_update()
            )
            orm = result.scalar_one_or_none()
            if not orm:
                raise NotFoundError(f"Todo {todo_id} not found")

            update_data = update.model_dump(exclude_unset=True)
            if update_data.get("milestone_id"):
                await self._ensure_milestone(session, update_data["milestone_id"])
            if update_data.get("parent_id"):
                await self._ensure_parent(session, update_data["parent_id"], todo_id=todo_id)

            previous_status = orm.status
            new_status = None
            for field, value in update_data.items():
                if value is None and field not in NULLABLE_TODO_FIELDS:
                    continue
                if hasattr(value, "value"):  # Enum
                    value = value.value
                if field == "status":
                    new_status = value
                    continue
                setattr(orm, field, value)

            orm.updated_at = now_utc()
            if new_status is not None:
                await session.execute(
                    sa_update(TodoORM)
                    .where(TodoORM.id == todo_id)
                    .values(status=new_status, completed_at=completed_at_for(new_status))
                    .execution_options(synchronize_session=False)
                )
            await session.commit()

            if new_status is not None and new_status != previous_status:
                logger.info(f"Todo {todo_id} status {previous_status} -> {new_status}")

            updated = await self._load_detail(session, todo_id)
            return todo_to_detail(updated)

    async def delete(self, todo_id: str) -> None:
        """Delete a todo. Descendants go with it through ON DELETE CASCADE."""
        async with session_scope(self._session_factory, "Failed to delete todo") as session:
            result = await session.execute(delete(TodoORM).where(TodoORM.id == todo_id))
            if result.rowcount == 0:
                raise NotFoundError(f"Todo {todo_id} not found")
            await session.commit()
            logger.info(f"Deleted todo {todo_id} and its descendants")
