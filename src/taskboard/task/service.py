"""Task service."""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from .exceptions import (
    AssigneeRequiredError,
    InvalidQueryParamsError,
    TaskNotFoundError,
    TaskValidationError,
    TitleRequiredError,
)
from .models import TaskRecord
from .normalizer import (
    build_task_filter,
    build_task_insert,
    build_task_patch,
    parse_task_id,
    parse_user_id,
)
from .repository import TaskRepository
from .validation import (
    Invalid,
    validate_create_payload,
    validate_list_query,
    validate_update_payload,
)

__all__ = [
    "create_task_svc",
    "delete_task_svc",
    "get_task_svc",
    "list_tasks_svc",
    "update_task_svc",
]


async def list_tasks_svc(
    repo: TaskRepository, raw_query: Mapping[str, Any]
) -> list[TaskRecord]:
    """List the tasks matching the query parameters.

    Args:
        repo: Task persistence port.
        raw_query: Raw query parameters (``status``, ``priority``, ``createdAt``).

    Returns:
        Matching tasks joined with their assignee.

    Raises:
        InvalidQueryParamsError: If any parameter fails validation.
    """
    result = validate_list_query(raw_query)
    if isinstance(result, Invalid):
        logger.debug("Invalid list query", issues=result.description)
        raise InvalidQueryParamsError

    return await repo.find_tasks(build_task_filter(result.value))


async def get_task_svc(repo: TaskRepository, raw_id: str | None) -> TaskRecord:
    """Read a single task by its ID.

    Args:
        repo: Task persistence port.
        raw_id: Task ID as received in the path.

    Returns:
        The task joined with its assignee.

    Raises:
        TaskIdRequiredError: If the ID is missing.
        InvalidTaskIdError: If the ID is not numeric.
        TaskNotFoundError: If no task has this ID.
    """
    task_id = parse_task_id(raw_id)

    task = await repo.find_task_by_id(task_id)
    if task is None:
        raise TaskNotFoundError
    return task


async def create_task_svc(
    repo: TaskRepository,
    body: Any,  # noqa: ANN401
) -> TaskRecord:
    """Create a task assigned to an existing user.

    Title and assignee presence are checked before the payload schema runs,
    so their messages win over generic schema issues.

    Args:
        repo: Task persistence port.
        body: Decoded JSON request body. A missing body counts as ``{}``.

    Returns:
        The stored task joined with its assignee.

    Raises:
        TaskValidationError: If the body is not an object or fails the schema.
        TitleRequiredError: If the title is missing or empty.
        AssigneeRequiredError: If ``userId`` is missing or falsy.
        InvalidAssigneeError: If ``userId`` is not an integer.
    """
    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise TaskValidationError

    if not body.get("title"):
        raise TitleRequiredError
    if not body.get("userId"):
        raise AssigneeRequiredError

    result = validate_create_payload(body)
    if isinstance(result, Invalid):
        raise TaskValidationError(result.description)

    user_id = parse_user_id(body["userId"])
    task = await repo.insert_task(build_task_insert(result.value, user_id))
    logger.debug("Task created", task_id=task.id, user_id=user_id)
    return task


async def update_task_svc(
    repo: TaskRepository,
    raw_id: str | None,
    body: Any,  # noqa: ANN401
) -> TaskRecord:
    """Apply a partial update to a task.

    Args:
        repo: Task persistence port.
        raw_id: Task ID as received in the path.
        body: Decoded JSON request body with the fields to change. A missing
            body counts as ``{}``.

    Returns:
        The updated task joined with its assignee.

    Raises:
        TaskIdRequiredError: If the ID is missing.
        InvalidTaskIdError: If the ID is not numeric.
        TaskValidationError: If the body is not an object or fails the schema.
        TaskNotFoundError: If no task has this ID.
    """
    task_id = parse_task_id(raw_id)

    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise TaskValidationError

    result = validate_update_payload(body)
    if isinstance(result, Invalid):
        raise TaskValidationError(result.description)

    task = await repo.update_task(task_id, build_task_patch(result.value))
    if task is None:
        raise TaskNotFoundError
    return task


async def delete_task_svc(repo: TaskRepository, raw_id: str | None) -> None:
    """Delete a task by its ID.

    Raises:
        TaskIdRequiredError: If the ID is missing.
        InvalidTaskIdError: If the ID is not numeric.
        TaskNotFoundError: If no task has this ID.
    """
    task_id = parse_task_id(raw_id)

    if not await repo.delete_task(task_id):
        raise TaskNotFoundError
