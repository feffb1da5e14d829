"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that inject the correct
infrastructure implementations based on environment configuration.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from opsboard.core.config import get_settings
from opsboard.interfaces.milestone_repository import IMilestoneRepository
from opsboard.interfaces.todo_repository import ITodoRepository


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_milestone_repository() -> IMilestoneRepository:
    """Get milestone repository instance."""
    settings = get_settings()
    if not settings.is_local:
        raise NotImplementedError(f"No milestone repository for {settings.ENVIRONMENT}")
    from opsboard.infrastructure.local.milestone_repository import SqliteMilestoneRepository
    return SqliteMilestoneRepository()


@lru_cache()
def get_todo_repository() -> ITodoRepository:
    """Get todo repository instance."""
    settings = get_settings()
    if not settings.is_local:
        raise NotImplementedError(f"No todo repository for {settings.ENVIRONMENT}")
    from opsboard.infrastructure.local.todo_repository import SqliteTodoRepository
    return SqliteTodoRepository()


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

MilestoneRepo = Annotated[IMilestoneRepository, Depends(get_milestone_repository)]
TodoRepo = Annotated[ITodoRepository, Depends(get_todo_repository)]
