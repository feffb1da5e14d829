"""
Milestone repository interface.

Defines the contract for milestone data operations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from opsboard.models.board import MilestoneWithTodos
from opsboard.models.milestone import Milestone, MilestoneCreate, MilestoneUpdate


class IMilestoneRepository(ABC):
    """Interface for milestone repository operations."""

    @abstractmethod
    async def list(self) -> list[MilestoneWithTodos]:
        """List milestones by date with root todos and two levels of children."""
        pass

    @abstractmethod
    async def get(self, milestone_id: str) -> MilestoneWithTodos:
        """Get a milestone with its todo tree. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    async def create(self, milestone: MilestoneCreate) -> Milestone:
        """Create a new milestone."""
        pass

    @abstractmethod
    async def update(self, milestone_id: str, update: MilestoneUpdate) -> Milestone:
        """Apply the supplied fields. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    async def delete(self, milestone_id: str) -> None:
        """Delete a milestone and detach its todos. Raises NotFoundError if absent."""
        pass
