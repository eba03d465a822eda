# ruff: noqa: S101

"""Tests for task POST, PUT and DELETE endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

_PENDING_TASK_ID = 3
_DELETE_TASK_ID = 4
_MISSING_TASK_ID = 4242
_UNKNOWN_USER_ID = 999


@pytest.mark.asyncio
@pytest.mark.task
@pytest.mark.task_write
class TestCreateTask:
    """Tests for POST /tasks."""

    @classmethod
    async def test_create_with_defaults(cls, client: TestClient) -> None:
        """Test that status and priority default to pending and medium."""
        response = client.post("/tasks", json={"title": "Write tests", "userId": 2})

        assert response.status_code == status.HTTP_201_CREATED
        task = response.json()
        assert task["title"] == "Write tests"
        assert task["status"] == "pending"
        assert task["priority"] == "medium"
        assert task["userId"] == 2
        assert task["assignee"]["id"] == 2

    @classmethod
    async def test_get_after_create(cls, client: TestClient) -> None:
        """Test that a created task can be read back with its assignee."""
        created = client.post(
            "/tasks",
            json={
                "title": "Review PR",
                "description": "Check the migration",
                "status": "in-progress",
                "priority": "high",
                "userId": 1,
            },
        ).json()

        response = client.get(f"/tasks/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        task = response.json()
        assert task == created
        assert task["assignee"]["id"] == 1
        assert task["description"] == "Check the migration"

    @classmethod
    async def test_numeric_description(cls, client: TestClient) -> None:
        """Test that a non-string description is rejected."""
        response = client.post(
            "/tasks", json={"title": "X", "description": 5, "userId": 1}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "description" in response.text

    @classmethod
    async def test_null_description(cls, client: TestClient) -> None:
        """Test that an explicit null description is rejected."""
        response = client.post(
            "/tasks", json={"title": "X", "description": None, "userId": 1}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "description: Value must not be null"

    @classmethod
    async def test_missing_body(cls, client: TestClient) -> None:
        """Test that a request without body asks for a title."""
        response = client.post("/tasks")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "Title is required"

    @classmethod
    async def test_created_at_is_utc(cls, client: TestClient) -> None:
        """Test that timestamps are serialized with a UTC designator."""
        response = client.post("/tasks", json={"title": "Clock", "userId": 1})

        task = response.json()
        assert task["createdAt"].endswith("Z")
        assert task["updatedAt"].endswith("Z")
        fetched = client.get(f"/tasks/{task['id']}").json()
        assert fetched["createdAt"].endswith("Z")

    @classmethod
    async def test_string_user_id(cls, client: TestClient) -> None:
        """Test that a numeric string assignee is accepted."""
        response = client.post("/tasks", json={"title": "Text ID", "userId": "2"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["assignee"]["id"] == 2

    @classmethod
    async def test_empty_title(cls, client: TestClient) -> None:
        """Test that an empty title is rejected before the assignee check."""
        response = client.post("/tasks", json={"title": "", "userId": 5})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "Title is required" in response.text

    @classmethod
    @pytest.mark.parametrize("user_id", [None, 0, ""])
    async def test_missing_assignee(cls, client: TestClient, user_id: object) -> None:
        """Test that a falsy assignee is rejected."""
        response = client.post("/tasks", json={"title": "X", "userId": user_id})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "User ID (assignee) is required"

    @classmethod
    async def test_non_numeric_assignee(cls, client: TestClient) -> None:
        """Test that a non-numeric assignee is rejected."""
        response = client.post("/tasks", json={"title": "X", "userId": "abc"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "User ID must be a number"

    @classmethod
    async def test_invalid_status(cls, client: TestClient) -> None:
        """Test that an unknown status is reported with its field name."""
        response = client.post(
            "/tasks", json={"title": "X", "userId": 1, "status": "done"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text.startswith("status:")

    @classmethod
    async def test_unknown_user(cls, client: TestClient) -> None:
        """Test that a missing user surfaces as an unclassified server error."""
        response = client.post(
            "/tasks", json={"title": "X", "userId": _UNKNOWN_USER_ID}
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Internal server error"

        tasks = client.get("/tasks").json()
        assert all(task["userId"] != _UNKNOWN_USER_ID for task in tasks)

    @classmethod
    async def test_body_not_an_object(cls, client: TestClient) -> None:
        """Test that a JSON array body is rejected."""
        response = client.post("/tasks", json=["title", "X"])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "Invalid request"

    @classmethod
    async def test_malformed_json(cls, client: TestClient) -> None:
        """Test that a body that is not valid JSON is rejected."""
        response = client.post(
            "/tasks",
            content=b"{title: X",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "Invalid request"


@pytest.mark.asyncio
@pytest.mark.task
@pytest.mark.task_write
class TestUpdateTask:
    """Tests for PUT /tasks/{task_id}."""

    @classmethod
    async def test_partial_update(cls, client: TestClient) -> None:
        """Test that absent fields keep their previous value."""
        before = client.get(f"/tasks/{_PENDING_TASK_ID}").json()

        response = client.put(
            f"/tasks/{_PENDING_TASK_ID}", json={"status": "completed"}
        )

        assert response.status_code == status.HTTP_200_OK
        task = response.json()
        assert task["status"] == "completed"
        assert task["title"] == before["title"]
        assert task["priority"] == before["priority"]
        assert task["userId"] == before["userId"]
        assert task["createdAt"] == before["createdAt"]

    @classmethod
    async def test_empty_update_is_noop(cls, client: TestClient) -> None:
        """Test that an empty body returns the unchanged task."""
        before = client.get(f"/tasks/{_PENDING_TASK_ID}").json()

        response = client.put(f"/tasks/{_PENDING_TASK_ID}", json={})

        assert response.status_code == status.HTTP_200_OK
        task = response.json()
        assert task["title"] == before["title"]
        assert task["status"] == before["status"]

    @classmethod
    async def test_null_title(cls, client: TestClient) -> None:
        """Test that an explicit null is rejected and nothing is changed."""
        before = client.get(f"/tasks/{_PENDING_TASK_ID}").json()

        response = client.put(
            f"/tasks/{_PENDING_TASK_ID}", json={"title": None, "priority": "low"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "title: Value must not be null"
        assert client.get(f"/tasks/{_PENDING_TASK_ID}").json() == before

    @classmethod
    async def test_missing_body_is_noop(cls, client: TestClient) -> None:
        """Test that a request without body leaves the task unchanged."""
        before = client.get(f"/tasks/{_PENDING_TASK_ID}").json()

        response = client.put(f"/tasks/{_PENDING_TASK_ID}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == before["title"]
        assert response.json()["status"] == before["status"]
        assert response.json()["priority"] == before["priority"]

    @classmethod
    async def test_reassign(cls, client: TestClient) -> None:
        """Test that the assignee can be changed."""
        response = client.put(f"/tasks/{_PENDING_TASK_ID}", json={"userId": 2})

        assert response.status_code == status.HTTP_200_OK
        task = response.json()
        assert task["userId"] == 2
        assert task["assignee"]["id"] == 2

        assert client.get(f"/tasks/{_PENDING_TASK_ID}").json()["assignee"]["id"] == 2

    @classmethod
    async def test_empty_title(cls, client: TestClient) -> None:
        """Test that an explicit empty title is rejected."""
        response = client.put(f"/tasks/{_PENDING_TASK_ID}", json={"title": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "Title cannot be empty"

    @classmethod
    async def test_missing_task(cls, client: TestClient) -> None:
        """Test updating a task that does not exist."""
        response = client.put(f"/tasks/{_MISSING_TASK_ID}", json={"title": "X"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.text == "Task not found"

    @classmethod
    async def test_non_numeric_id(cls, client: TestClient) -> None:
        """Test that the ID is validated before the body."""
        response = client.put("/tasks/abc", json={"title": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "Task ID must be a number"


@pytest.mark.asyncio
@pytest.mark.task
@pytest.mark.task_write
class TestDeleteTask:
    """Tests for DELETE /tasks/{task_id}."""

    @classmethod
    async def test_delete_twice(cls, client: TestClient) -> None:
        """Test that deleting removes the task and repeated deletes are 404."""
        response = client.delete(f"/tasks/{_DELETE_TASK_ID}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        for _ in range(2):
            response = client.delete(f"/tasks/{_DELETE_TASK_ID}")
            assert response.status_code == status.HTTP_404_NOT_FOUND
            assert response.text == "Task not found"

        response = client.get(f"/tasks/{_DELETE_TASK_ID}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @classmethod
    async def test_non_numeric_id(cls, client: TestClient) -> None:
        """Test deleting with a non-numeric ID."""
        response = client.delete("/tasks/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "Task ID must be a number"
