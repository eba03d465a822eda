"""Global exception handlers for Application."""

from asyncio import CancelledError

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from loguru import logger

from taskboard.common.app_error import AppError
from taskboard.config import settings
from taskboard.config.errors import ErrorCode, ErrorNames

from .error_path import get_error_path

__all__ = ["register_exception_handlers"]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI application.

    Every error response carries its message as a plain-text body.

    Registers handlers for:
    - Application errors (AppError)
    - Request decoding errors (RequestValidationError)
    - Unexpected exceptions (ServerError)

    Args:
        app: The FastAPI application instance to register handlers with.
    """

    @app.exception_handler(AppError)
    def _handle_app_error(_request: Request, exc: AppError) -> PlainTextResponse:
        """Handle application-specific errors.

        Args:
            request: The incoming HTTP request.
            exc: The application error that was raised.

        Returns:
            PlainTextResponse: The error message with the error's status code.
        """
        logger.debug("{}: {}", exc.error_code, exc.message, path=get_error_path(exc))
        return PlainTextResponse(str(exc.message), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    def _handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        """Handle bodies FastAPI could not decode, e.g. malformed JSON.

        Args:
            request: The incoming HTTP request.
            exc: The validation error raised while decoding the request.

        Returns:
            PlainTextResponse: A 400 error response.
        """
        logger.debug(
            "{}: {}", ErrorCode.VALIDATION_ERROR, exc.errors(), path=get_error_path(exc)
        )
        return PlainTextResponse(
            str(ErrorNames.INVALID_REQUEST_ERROR),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    def _handle_unexpected(_request: Request, exc: Exception) -> PlainTextResponse:
        """Handle any uncaught exceptions as 500 server errors.

        Args:
            request: The incoming HTTP request.
            exc: The uncaught exception.

        Returns:
            PlainTextResponse: A 500 error response without internal details.

        Raises:
            CancelledError: Re-raised in non-development environments.
        """
        # Pass through cancellations in dev
        if isinstance(exc, CancelledError) and settings.app_env != "development":
            raise exc

        logger.exception("{}", str(exc), path=get_error_path(exc))
        return PlainTextResponse(
            str(ErrorNames.INTERNAL_SERVER_ERROR),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
