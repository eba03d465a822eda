"""Normalize validated input into filter predicates and mutation sets."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

from .exceptions import (
    AssigneeRequiredError,
    InvalidAssigneeError,
    InvalidTaskIdError,
    TaskIdRequiredError,
)
from .models import TaskInsert, TaskPatch
from .schemas import TaskCreate, TaskQuery, TaskUpdate
from .task_priority import TaskPriority
from .task_status import TaskStatus
from .utils.parsers import parse_numeric_id, parse_timestamp

__all__ = [
    "FilterClause",
    "TaskFilter",
    "build_task_filter",
    "build_task_insert",
    "build_task_patch",
    "parse_task_id",
    "parse_user_id",
]


@dataclass(frozen=True)
class FilterClause:
    """One condition on a task column."""

    field: Literal["status", "priority", "created_at"]
    operator: Literal["eq", "gte"]
    value: TaskStatus | TaskPriority | datetime


@dataclass(frozen=True)
class TaskFilter:
    """AND-combined filter clauses. No clauses matches every task."""

    clauses: tuple[FilterClause, ...] = ()

    @property
    def matches_all(self) -> bool:
        """Whether the filter places no restriction on the result."""
        return not self.clauses


def build_task_filter(query: TaskQuery) -> TaskFilter:
    """Convert validated list-query parameters into a filter predicate.

    Args:
        query: Validated list-query parameters.

    Returns:
        Filter with an exact-match clause per given enum and a lower bound on
        the creation timestamp when ``createdAt`` is set.
    """
    clauses: list[FilterClause] = []

    if query.status:
        clauses.append(FilterClause("status", "eq", query.status))

    if query.priority:
        clauses.append(FilterClause("priority", "eq", query.priority))

    if query.created_at:
        created_from = parse_timestamp(query.created_at)
        if created_from is not None:
            clauses.append(FilterClause("created_at", "gte", created_from))

    return TaskFilter(tuple(clauses))


def build_task_insert(payload: TaskCreate, user_id: int) -> TaskInsert:
    """Build the values of a new task, applying status and priority defaults."""
    values: dict[str, Any] = {"title": payload.title, "user_id": user_id}
    if payload.description is not None:
        values["description"] = payload.description
    if payload.status is not None:
        values["status"] = payload.status
    if payload.priority is not None:
        values["priority"] = payload.priority
    return TaskInsert(**values)


def build_task_patch(payload: TaskUpdate) -> TaskPatch:
    """Build a patch holding only the fields given with a non-null value."""
    changes = {
        field: value
        for field, value in payload.model_dump(exclude_unset=True).items()
        if value is not None
    }
    return TaskPatch(**changes)


def parse_task_id(raw: str | None) -> int | float:
    """Validate a raw task ID.

    Args:
        raw: Path segment holding the ID.

    Returns:
        The numeric ID. Zero, negative and fractional values are returned as-is.

    Raises:
        TaskIdRequiredError: If the ID is missing or blank.
        InvalidTaskIdError: If the ID is not numeric.
    """
    if raw is None or not raw.strip():
        raise TaskIdRequiredError

    task_id = parse_numeric_id(raw)
    if task_id is None:
        raise InvalidTaskIdError
    return task_id


def parse_user_id(raw: Any) -> int:  # noqa: ANN401
    """Validate the assignee of a new task.

    Args:
        raw: ``userId`` value from the request body.

    Returns:
        The assignee ID.

    Raises:
        AssigneeRequiredError: If the value is missing or falsy.
        InvalidAssigneeError: If the value is not an integer.
    """
    if not raw:
        raise AssigneeRequiredError

    user_id = parse_numeric_id(raw)
    if not isinstance(user_id, int):
        raise InvalidAssigneeError
    return user_id
