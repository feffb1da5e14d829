"""
Milestone API endpoints.

Provides CRUD operations for milestones.
"""

from fastapi import APIRouter, HTTPException, status

from opsboard.api.deps import MilestoneRepo
from opsboard.core.exceptions import NotFoundError
from opsboard.models.board import MilestoneWithTodos
from opsboard.models.common import SuccessResponse
from opsboard.models.milestone import Milestone, MilestoneCreate, MilestoneUpdate

router = APIRouter(prefix="/milestones", tags=["milestones"])


@router.get("", response_model=list[MilestoneWithTodos])
async def list_milestones(repo: MilestoneRepo) -> list[MilestoneWithTodos]:
    """List milestones by date, each with root todos and two levels of children."""
    return await repo.list()


@router.get("/{milestone_id}", response_model=MilestoneWithTodos)
async def get_milestone(milestone_id: str, repo: MilestoneRepo) -> MilestoneWithTodos:
    """Get a milestone by ID."""
    try:
        return await repo.get(milestone_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.post("", response_model=Milestone, status_code=status.HTTP_201_CREATED)
async def create_milestone(milestone: MilestoneCreate, repo: MilestoneRepo) -> Milestone:
    """Create a new milestone."""
    return await repo.create(milestone)


@router.put("/{milestone_id}", response_model=Milestone)
async def update_milestone(
    milestone_id: str,
    milestone: MilestoneUpdate,
    repo: MilestoneRepo,
) -> Milestone:
    """Update a milestone. Only fields present in the body are changed."""
    try:
        return await repo.update(milestone_id, milestone)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.delete("/{milestone_id}", response_model=SuccessResponse)
async def delete_milestone(milestone_id: str, repo: MilestoneRepo) -> SuccessResponse:
    """Delete a milestone. Its todos are kept and detached."""
    try:
        await repo.delete(milestone_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return SuccessResponse()
