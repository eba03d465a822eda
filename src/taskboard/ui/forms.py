"""Create-task form model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from taskboard.task.task_priority import TaskPriority
from taskboard.task.task_status import TaskStatus
from taskboard.task.utils.parsers import parse_numeric_id

__all__ = ["CreateTaskForm"]


class CreateTaskForm(BaseModel):
    """User input for a new task, checked before it is sent to the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(default="", validate_default=True)
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    user_id: int = Field(default=1)

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("title_required", "Title is required")
        return value

    @field_validator("user_id", mode="before")
    @classmethod
    def _check_user_id(cls, value: Any) -> Any:  # noqa: ANN401
        number = parse_numeric_id(value)
        if not isinstance(number, int) or number < 1:
            raise PydanticCustomError(
                "user_id_positive", "User ID must be a positive number"
            )
        return number

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body expected by ``POST /tasks``."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not payload.get("description"):
            payload.pop("description", None)
        return payload
