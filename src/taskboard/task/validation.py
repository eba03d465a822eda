"""Schema validation returning tagged results instead of raising."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from .schemas import TaskCreate, TaskQuery, TaskUpdate

__all__ = [
    "Invalid",
    "Valid",
    "ValidationIssue",
    "ValidationResult",
    "validate_create_payload",
    "validate_list_query",
    "validate_update_payload",
]


@dataclass(frozen=True)
class ValidationIssue:
    """A single violated field."""

    field: str
    message: str


@dataclass(frozen=True)
class Valid[T]:
    """Successful validation carrying the typed value."""

    value: T


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying every violated field."""

    issues: tuple[ValidationIssue, ...]

    @property
    def description(self) -> str:
        """All issue messages joined into a single failure description."""
        return ", ".join(issue.message for issue in self.issues)


type ValidationResult[T] = Valid[T] | Invalid


def validate_list_query(raw: Mapping[str, Any]) -> ValidationResult[TaskQuery]:
    """Validate list-query parameters."""
    return _validate(TaskQuery, raw)


def validate_create_payload(raw: Mapping[str, Any]) -> ValidationResult[TaskCreate]:
    """Validate a create payload."""
    return _validate(TaskCreate, raw)


def validate_update_payload(raw: Mapping[str, Any]) -> ValidationResult[TaskUpdate]:
    """Validate an update payload."""
    return _validate(TaskUpdate, raw)


def _validate[M: BaseModel](schema: type[M], raw: Any) -> ValidationResult[M]:  # noqa: ANN401
    """Run a schema over raw input and collect every issue.

    Args:
        schema: Pydantic model describing the shape.
        raw: Untyped input, usually a decoded JSON object or query mapping.

    Returns:
        Valid with the parsed model, or Invalid listing every violated field.
    """
    try:
        return Valid(schema.model_validate(raw))
    except ValidationError as e:
        return Invalid(tuple(_to_issue(error) for error in e.errors()))


def _to_issue(error: Mapping[str, Any]) -> ValidationIssue:
    loc = error.get("loc", ())
    field = ".".join(str(part) for part in loc) if loc else "body"
    message = error["msg"]

    # Custom errors already read as complete sentences
    if error["type"] in _CUSTOM_ERROR_TYPES:
        return ValidationIssue(field, message)
    return ValidationIssue(field, f"{field}: {message}")


_CUSTOM_ERROR_TYPES = frozenset({
    "invalid_date",
    "title_required",
    "title_empty",
    "invalid_assignee",
})
