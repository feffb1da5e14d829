"""Abstract interfaces for infrastructure abstraction."""

from opsboard.interfaces.milestone_repository import IMilestoneRepository
from opsboard.interfaces.todo_repository import ITodoRepository

__all__ = [
    "IMilestoneRepository",
    "ITodoRepository",
]
