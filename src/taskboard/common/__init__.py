"""Common module for shared error handling.

This module provides the foundational error types used throughout the
application so every layer raises the same structured exceptions and the
HTTP boundary can translate them uniformly.

Key Components:
- AppError: Base class carrying an error code, message and HTTP status
- BadRequestError: Client input errors surfaced as 400
- NotFoundError: Missing resources surfaced as 404
"""

from .app_error import AppError
from .exceptions import BadRequestError, NotFoundError

__all__ = [
    "AppError",
    "BadRequestError",
    "NotFoundError",
]
