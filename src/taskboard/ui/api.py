"""REST client for the task endpoints."""

from collections.abc import Mapping
from types import TracebackType
from typing import Any, Self

import httpx
from loguru import logger

from taskboard.task.models import TaskRecord

__all__ = ["TasksApi", "TasksApiError"]


class TasksApiError(Exception):
    """Exception raised when the task API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize with the message to show and the HTTP status."""
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TasksApi:
    """Async client for the task API.

    Can be used as an async context manager. A client passed in by the caller
    is not closed by this class.
    """

    def __init__(
        self, base_url: str, client: httpx.AsyncClient | None = None
    ) -> None:
        """Initialize with the API base URL and an optional shared client."""
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url.rstrip("/"))

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def get_all(
        self, filters: Mapping[str, str | None] | None = None
    ) -> list[TaskRecord]:
        """Fetch all tasks, optionally filtered by status, priority or createdAt."""
        params = {k: v for k, v in (filters or {}).items() if v}
        response = await self._client.get("/tasks", params=params)
        _raise_for_status(response, "Failed to fetch tasks")
        return [TaskRecord.model_validate(item) for item in response.json()]

    async def get_by_id(self, task_id: int | str) -> TaskRecord:
        """Fetch a single task."""
        response = await self._client.get(f"/tasks/{task_id}")
        _raise_for_status(response, "Failed to fetch task")
        return TaskRecord.model_validate(response.json())

    async def create(self, payload: Mapping[str, Any]) -> TaskRecord:
        """Create a task and return it as stored by the server."""
        response = await self._client.post("/tasks", json=dict(payload))
        _raise_for_status(response, "Failed to create task", use_body=True)
        return TaskRecord.model_validate(response.json())

    async def update(
        self, task_id: int | str, payload: Mapping[str, Any]
    ) -> TaskRecord:
        """Apply a partial update and return the updated task."""
        response = await self._client.put(f"/tasks/{task_id}", json=dict(payload))
        _raise_for_status(response, "Failed to update task", use_body=True)
        return TaskRecord.model_validate(response.json())

    async def delete(self, task_id: int | str) -> None:
        """Delete a task."""
        response = await self._client.delete(f"/tasks/{task_id}")
        _raise_for_status(response, "Failed to delete task")


def _raise_for_status(
    response: httpx.Response, fallback: str, use_body: bool = False
) -> None:
    if response.is_success:
        return

    message = (response.text.strip() if use_body else "") or fallback
    logger.debug(
        "Task API request failed",
        method=response.request.method,
        url=str(response.request.url),
        status=response.status_code,
    )
    raise TasksApiError(message, response.status_code)
