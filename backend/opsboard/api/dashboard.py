"""
Dashboard API endpoint.

Serves the overview aggregate computed from the milestones-with-todos tree.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from opsboard.api.deps import MilestoneRepo
from opsboard.models.board import DashboardOverview
from opsboard.services.dashboard_service import build_overview
from opsboard.utils.datetime_utils import today_utc

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOverview)
async def get_dashboard(
    repo: MilestoneRepo,
    today: Optional[date] = Query(None, description="Reference date (defaults to today, UTC)"),
) -> DashboardOverview:
    """Milestone progress, urgent todos and status counts."""
    milestones = await repo.list()
    return build_overview(milestones, today or today_utc())
