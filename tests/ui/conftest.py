"""Fixtures for the task API client and the command line front end."""

from collections.abc import AsyncGenerator

import httpx
import pytest
from fastapi.testclient import TestClient

from taskboard.app import app
from taskboard.ui.api import TasksApi

BASE_URL = "http://testserver"


@pytest.fixture(name="api")
async def api_fixture(client: TestClient) -> AsyncGenerator[TasksApi]:  # noqa: ARG001
    """Client wired to the app with the per-test database."""
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as http:
        yield TasksApi(BASE_URL, client=http)
