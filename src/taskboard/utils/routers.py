"""Router Initializer."""

from fastapi import FastAPI

from taskboard.common.router import router as common_router
from taskboard.task.router import router as task_router

__all__ = ["register_routers"]


def register_routers(app: FastAPI) -> None:
    """Register all API routers with the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(common_router)
    app.include_router(task_router, prefix="/tasks")
