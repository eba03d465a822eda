"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorCode", "ErrorNames"]


class ErrorCode(StrEnum):
    """Error codes for standardized error handling."""

    # General errors
    SERVER_ERROR = "SERVER_ERROR"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Task errors
    INVALID_TASK_ID = "INVALID_TASK_ID"
    MISSING_TASK_ID = "MISSING_TASK_ID"
    MISSING_TITLE = "MISSING_TITLE"
    MISSING_ASSIGNEE = "MISSING_ASSIGNEE"
    INVALID_ASSIGNEE = "INVALID_ASSIGNEE"


class ErrorNames(StrEnum):
    """Error names for standardized error handling."""

    INTERNAL_SERVER_ERROR = "Internal server error"
    INVALID_REQUEST_ERROR = "Invalid request"
    INVALID_QUERY_PARAMS_ERROR = "Invalid query parameters"

    # Task errors
    TASK_NOT_FOUND_ERROR = "Task not found"
    TASK_ID_REQUIRED_ERROR = "Task ID is required"
    TASK_ID_NOT_NUMBER_ERROR = "Task ID must be a number"
    TITLE_REQUIRED_ERROR = "Title is required"
    TITLE_EMPTY_ERROR = "Title cannot be empty"
    ASSIGNEE_REQUIRED_ERROR = "User ID (assignee) is required"
    ASSIGNEE_NOT_NUMBER_ERROR = "User ID must be a number"
    INVALID_DATE_ERROR = "createdAt must be a valid date"
