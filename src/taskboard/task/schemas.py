"""Validation schemas for task list queries and payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from taskboard.config.errors import ErrorNames

from .task_priority import TaskPriority
from .task_status import TaskStatus
from .utils.parsers import parse_numeric_id, parse_timestamp

__all__ = ["TaskCreate", "TaskQuery", "TaskUpdate"]


class _TaskSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class _PayloadSchema(_TaskSchema):
    # Optional fields may be omitted but never sent as null
    @field_validator(
        "title", "description", "status", "priority", mode="before", check_fields=False
    )
    @classmethod
    def _reject_null(cls, value: Any) -> Any:  # noqa: ANN401
        if value is None:
            raise PydanticCustomError("null_value", "Value must not be null")
        return value


class TaskQuery(_TaskSchema):
    """Parameters for filtering the task list."""

    status: TaskStatus | None = Field(None, description="Filter by task status")
    priority: TaskPriority | None = Field(None, description="Filter by task priority")
    created_at: str | None = Field(
        None, description="Only tasks created at or after this ISO-8601 timestamp"
    )

    @field_validator("status", "priority", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:  # noqa: ANN401
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("created_at")
    @classmethod
    def _check_created_at(cls, value: str | None) -> str | None:
        if value and parse_timestamp(value) is None:
            raise PydanticCustomError(
                "invalid_date", str(ErrorNames.INVALID_DATE_ERROR)
            )
        return value


class TaskCreate(_PayloadSchema):
    """Payload for creating a task. The assignee is checked by the pipeline."""

    title: str = Field(description="Title of the task")
    description: str | None = Field(None, description="Description of the task")
    status: TaskStatus | None = Field(None, description="Initial status")
    priority: TaskPriority | None = Field(None, description="Initial priority")

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError(
                "title_required", str(ErrorNames.TITLE_REQUIRED_ERROR)
            )
        return value


class TaskUpdate(_PayloadSchema):
    """Partial payload for updating a task."""

    title: str | None = Field(None, description="New title")
    description: str | None = Field(None, description="New description")
    status: TaskStatus | None = Field(None, description="New status")
    priority: TaskPriority | None = Field(None, description="New priority")
    user_id: int | None = Field(None, description="ID of the new assignee")

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str | None) -> str | None:
        if value is not None and len(value) < 1:
            raise PydanticCustomError(
                "title_empty", str(ErrorNames.TITLE_EMPTY_ERROR)
            )
        return value

    @field_validator("user_id", mode="before")
    @classmethod
    def _coerce_user_id(cls, value: Any) -> Any:  # noqa: ANN401
        if value is None:
            return value
        number = parse_numeric_id(value)
        if not isinstance(number, int):
            raise PydanticCustomError(
                "invalid_assignee", str(ErrorNames.ASSIGNEE_NOT_NUMBER_ERROR)
            )
        return number
