"""API routers."""

from opsboard.api import (
    dashboard,
    milestones,
    todos,
)

__all__ = [
    "dashboard",
    "milestones",
    "todos",
]
