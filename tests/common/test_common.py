# ruff: noqa: S101

"""Tests for the common endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient


@pytest.mark.asyncio
@pytest.mark.common
class TestCommonEndpoints:
    """Tests for root, health and metrics endpoints."""

    @classmethod
    async def test_root(cls, client: TestClient) -> None:
        """Test the root endpoint."""
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "OK"

    @classmethod
    async def test_health(cls, client: TestClient) -> None:
        """Test the health endpoint."""
        response = client.get("/health")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

    @classmethod
    async def test_metrics(cls, client: TestClient) -> None:
        """Test that Prometheus metrics are exposed."""
        client.get("/tasks")

        response = client.get("/metrics")

        assert response.status_code == status.HTTP_200_OK
        assert "taskboard_http_requests_in_progress" in response.text
