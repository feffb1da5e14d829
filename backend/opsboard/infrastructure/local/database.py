"""
SQLite database configuration and ORM models.

This module defines the SQLAlchemy ORM models and database initialization.
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator
from uuid import uuid4

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    and_,
    event,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, relationship

from opsboard.core.config import get_settings
from opsboard.core.exceptions import InfrastructureError
from opsboard.core.logger import logger
from opsboard.models.milestone import DEFAULT_MILESTONE_COLOR
from opsboard.utils.datetime_utils import now_utc


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# ===========================================
# ORM Models
# ===========================================


class MilestoneORM(Base):
    """Milestone ORM model."""

    __tablename__ = "milestones"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    event_type = Column(String(50), nullable=False)
    color = Column(String(20), nullable=False, default=DEFAULT_MILESTONE_COLOR)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    # Deleting a milestone detaches its todos (milestone_id -> NULL)
    todos = relationship("TodoORM", back_populates="milestone", passive_deletes=True)
    root_todos = relationship(
        "TodoORM",
        primaryjoin=lambda: and_(
            MilestoneORM.id == TodoORM.milestone_id,
            TodoORM.parent_id.is_(None),
        ),
        order_by=lambda: [TodoORM.order, TodoORM.created_at],
        viewonly=True,
    )


class TodoORM(Base):
    """Todo ORM model."""

    __tablename__ = "todos"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="TODO", index=True)
    priority = Column(String(10), nullable=False, default="MEDIUM")
    deadline = Column(Date, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    milestone_id = Column(
        String(36),
        ForeignKey("milestones.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    parent_id = Column(
        String(36),
        ForeignKey("todos.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, index=True)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    milestone = relationship("MilestoneORM", back_populates="todos")
    parent = relationship("TodoORM", remote_side=[id], back_populates="children")
    # Descendants are removed by the ON DELETE CASCADE on parent_id
    children = relationship(
        "TodoORM",
        back_populates="parent",
        order_by=lambda: [TodoORM.order, TodoORM.created_at],
        passive_deletes=True,
    )


# ===========================================
# Database Session Management
# ===========================================


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores FK actions unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for_url(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Create an async engine, enabling foreign keys for SQLite URLs."""
    engine = create_async_engine(database_url, echo=echo, **kwargs)
    if database_url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


@lru_cache()
def get_engine() -> AsyncEngine:
    """Get async engine instance."""
    settings = get_settings()
    return create_engine_for_url(settings.DATABASE_URL, echo=settings.SQL_ECHO)


@lru_cache()
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Initialize database tables."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope(session_factory, failure_message: str) -> AsyncIterator[AsyncSession]:
    """
    Open a session and translate driver faults into InfrastructureError.

    Callers commit explicitly; anything left uncommitted is rolled back when
    the session closes. The original exception is logged, never returned to
    API clients.
    """
    async with session_factory() as session:
        try:
            yield session
        except SQLAlchemyError as exc:
            await session.rollback()
            logger.exception(failure_message)
            raise InfrastructureError(failure_message) from exc
