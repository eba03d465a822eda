"""Common exceptions."""

from fastapi import status

from taskboard.common.app_error import AppError
from taskboard.config.errors import ErrorCode, ErrorNames

__all__ = ["BadRequestError", "NotFoundError"]


class BadRequestError(AppError):
    """Exception raised when client input is malformed."""

    error_code = ErrorCode.VALIDATION_ERROR
    message = ErrorNames.INVALID_REQUEST_ERROR
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """Exception raised when something is not found."""

    error_code = ErrorCode.NOT_FOUND
    message = "Resource not found"
    status_code = status.HTTP_404_NOT_FOUND
