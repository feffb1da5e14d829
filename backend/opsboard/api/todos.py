"""
Todo API endpoints.

Provides CRUD operations for todos, including nested child todos.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from opsboard.api.deps import TodoRepo
from opsboard.core.exceptions import NotFoundError, ValidationError
from opsboard.models.common import SuccessResponse
from opsboard.models.enums import TodoStatus
from opsboard.models.todo import TodoCreate, TodoDetail, TodoUpdate

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=list[TodoDetail])
async def list_todos(
    repo: TodoRepo,
    milestone_id: Optional[str] = Query(None, alias="milestoneId", description="Filter by milestone"),
    todo_status: Optional[TodoStatus] = Query(None, alias="status", description="Filter by status"),
    parent_id: Optional[str] = Query(None, alias="parentId", description="Filter by parent todo"),
    root_only: bool = Query(False, alias="rootOnly", description="Only todos without a parent"),
) -> list[TodoDetail]:
    """List todos ordered by position, newest first among equal positions."""
    return await repo.list(
        milestone_id=milestone_id or None,
        status=todo_status,
        parent_id=parent_id or None,
        root_only=root_only,
    )


@router.get("/{todo_id}", response_model=TodoDetail)
async def get_todo(todo_id: str, repo: TodoRepo) -> TodoDetail:
    """Get a todo by ID."""
    try:
        return await repo.get(todo_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.post("", response_model=TodoDetail, status_code=status.HTTP_201_CREATED)
async def create_todo(todo: TodoCreate, repo: TodoRepo) -> TodoDetail:
    """Create a new todo."""
    try:
        return await repo.create(todo)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.put("/{todo_id}", response_model=TodoDetail)
async def update_todo(todo_id: str, todo: TodoUpdate, repo: TodoRepo) -> TodoDetail:
    """Update a todo. Only fields present in the body are changed."""
    try:
        return await repo.update(todo_id, todo)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc


@router.delete("/{todo_id}", response_model=SuccessResponse)
async def delete_todo(todo_id: str, repo: TodoRepo) -> SuccessResponse:
    """Delete a todo together with all of its descendants."""
    try:
        await repo.delete(todo_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return SuccessResponse()
