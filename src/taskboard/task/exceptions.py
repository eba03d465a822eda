"""Exceptions for task operations."""

from taskboard.common.exceptions import BadRequestError, NotFoundError
from taskboard.config.errors import ErrorCode, ErrorNames

__all__ = [
    "AssigneeRequiredError",
    "InvalidAssigneeError",
    "InvalidQueryParamsError",
    "InvalidTaskIdError",
    "TaskIdRequiredError",
    "TaskNotFoundError",
    "TaskValidationError",
    "TitleRequiredError",
]


class TaskNotFoundError(NotFoundError):
    """Exception raised when the task is not found."""

    message = ErrorNames.TASK_NOT_FOUND_ERROR


class TaskIdRequiredError(BadRequestError):
    """Exception raised when no task ID is given."""

    error_code = ErrorCode.MISSING_TASK_ID
    message = ErrorNames.TASK_ID_REQUIRED_ERROR


class InvalidTaskIdError(BadRequestError):
    """Exception raised when the task ID is not numeric."""

    error_code = ErrorCode.INVALID_TASK_ID
    message = ErrorNames.TASK_ID_NOT_NUMBER_ERROR


class TitleRequiredError(BadRequestError):
    """Exception raised when a task is created without a title."""

    error_code = ErrorCode.MISSING_TITLE
    message = ErrorNames.TITLE_REQUIRED_ERROR


class AssigneeRequiredError(BadRequestError):
    """Exception raised when a task is created without an assignee."""

    error_code = ErrorCode.MISSING_ASSIGNEE
    message = ErrorNames.ASSIGNEE_REQUIRED_ERROR


class InvalidAssigneeError(BadRequestError):
    """Exception raised when the assignee ID is not numeric."""

    error_code = ErrorCode.INVALID_ASSIGNEE
    message = ErrorNames.ASSIGNEE_NOT_NUMBER_ERROR


class TaskValidationError(BadRequestError):
    """Exception raised when a payload fails schema validation."""


class InvalidQueryParamsError(BadRequestError):
    """Exception raised when list query parameters fail validation."""

    message = ErrorNames.INVALID_QUERY_PARAMS_ERROR
