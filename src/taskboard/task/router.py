"""Task router."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, Response, status
from loguru import logger

from .models import TaskRecord
from .repository import TaskRepository, get_task_repository
from .service import (
    create_task_svc,
    delete_task_svc,
    get_task_svc,
    list_tasks_svc,
    update_task_svc,
)

__all__ = ["router"]


router = APIRouter(tags=["Task"])


@router.get("", summary="List tasks")
async def list_tasks(
    request: Request,
    repo: Annotated[TaskRepository, Depends(get_task_repository)],
) -> list[TaskRecord]:
    """Retrieve all tasks, optionally filtered.

    Supported query parameters are ``status``, ``priority`` and ``createdAt``
    (lower bound on the creation timestamp). Filters are combined with AND.

    Args:
        request: The HTTP request object carrying the query parameters
        repo: Task persistence port bound to the request's session

    Returns:
        List of tasks joined with their assignee
    """
    tasks = await list_tasks_svc(repo, dict(request.query_params))
    logger.debug("Tasks retrieved", length=len(tasks))
    return tasks


@router.get("/{task_id}", summary="Get task by ID")
async def get_task(
    task_id: str,
    repo: Annotated[TaskRepository, Depends(get_task_repository)],
) -> TaskRecord:
    """Retrieve a single task by its ID.

    Args:
        task_id: The ID of the task to retrieve
        repo: Task persistence port bound to the request's session

    Returns:
        The task joined with its assignee

    Raises:
        InvalidTaskIdError: If the ID is not numeric
        TaskNotFoundError: If the task doesn't exist
    """
    task = await get_task_svc(repo, task_id)
    logger.debug("Task retrieved", task_id=task.id)
    return task


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create task")
async def create_task(
    repo: Annotated[TaskRepository, Depends(get_task_repository)],
    body: Annotated[Any, Body()] = None,
) -> TaskRecord:
    """Create a new task.

    Args:
        repo: Task persistence port bound to the request's session
        body: JSON object with ``title``, ``userId`` and optional
            ``description``, ``status`` and ``priority``

    Returns:
        The created task joined with its assignee
    """
    return await create_task_svc(repo, body)


@router.put("/{task_id}", summary="Update task")
async def update_task(
    task_id: str,
    repo: Annotated[TaskRepository, Depends(get_task_repository)],
    body: Annotated[Any, Body()] = None,
) -> TaskRecord:
    """Update the given fields of a task.

    Args:
        task_id: The ID of the task to update
        repo: Task persistence port bound to the request's session
        body: JSON object with the fields to change

    Returns:
        The updated task joined with its assignee
    """
    task = await update_task_svc(repo, task_id, body)
    logger.debug("Task updated", task_id=task.id)
    return task


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete task"
)
async def delete_task(
    task_id: str,
    repo: Annotated[TaskRepository, Depends(get_task_repository)],
) -> Response:
    """Delete a task by its ID.

    Args:
        task_id: The ID of the task to delete
        repo: Task persistence port bound to the request's session

    Returns:
        Empty response with status 204
    """
    await delete_task_svc(repo, task_id)
    logger.debug("Task deleted", task_id=task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
