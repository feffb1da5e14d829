"""
Todo repository interface.

Defines the contract for todo data operations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from opsboard.models.enums import TodoStatus
from opsboard.models.todo import TodoCreate, TodoDetail, TodoUpdate


class ITodoRepository(ABC):
    """Interface for todo repository operations."""

    @abstractmethod
    async def list(
        self,
        milestone_id: Optional[str] = None,
        status: Optional[TodoStatus] = None,
        parent_id: Optional[str] = None,
        root_only: bool = False,
    ) -> list[TodoDetail]:
        """
        List todos with optional filters.

        ``root_only`` restricts to todos without a parent and overrides
        ``parent_id``.
        """
        pass

    @abstractmethod
    async def get(self, todo_id: str) -> TodoDetail:
        """Get a todo by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    async def create(self, todo: TodoCreate) -> TodoDetail:
        """Create a new todo, appending it to its siblings when no order is given."""
        pass

    @abstractmethod
    async def update(self, todo_id: str, update: TodoUpdate) -> TodoDetail:
        """Apply the supplied fields and derive completed_at. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    async def delete(self, todo_id: str) -> None:
        """Delete a todo and all of its descendants. Raises NotFoundError if absent."""
        pass
