# ruff: noqa: S101

"""Tests for the taskboard-ui command line front end."""

import json
from collections.abc import Callable

import httpx
import pytest
from pydantic import ValidationError

from taskboard.ui import cli
from taskboard.ui.api import TasksApi, TasksApiError

_BASE_URL = "http://testserver"
_TASK_JSON = {
    "id": 3,
    "title": "Write API documentation",
    "description": None,
    "status": "completed",
    "priority": "medium",
    "userId": 1,
    "createdAt": "2024-05-01T09:30:00Z",
    "updatedAt": "2024-05-03T17:00:00Z",
    "assignee": {"id": 1, "name": "Alice Johnson", "email": "alice@example.com"},
}

type Handler = Callable[[httpx.Request], httpx.Response]


def _mock_api(handler: Handler) -> TasksApi:
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url=_BASE_URL
    )
    return TasksApi(_BASE_URL, client=http)


async def _run(api: TasksApi, *argv: str) -> str:
    return await cli.run_command(cli.build_parser().parse_args(argv), api)


@pytest.mark.asyncio
@pytest.mark.ui
class TestRunCommand:
    """Tests for the sub-commands against the running app."""

    @classmethod
    async def test_list(cls, api: TasksApi) -> None:
        """Test that filters reach the server and rows are rendered."""
        output = await _run(api, "list", "--status", "pending", "--view", "list")

        assert output.startswith("Tasks")
        assert "Write API documentation" in output
        assert "Plan sprint review" in output
        assert "Set up project repository" not in output

    @classmethod
    async def test_show(cls, api: TasksApi) -> None:
        """Test the detail view of a completed task."""
        output = await _run(api, "show", "1")

        assert "Set up project repository ✓" in output
        assert "Assignee: Alice Johnson (alice@example.com)" in output

    @classmethod
    async def test_create(cls, api: TasksApi) -> None:
        """Test that the form values are sent and the stored task is shown."""
        output = await _run(
            api, "create", "--title", "Ship it", "--user-id", "2", "--priority", "high"
        )

        assert output.startswith("Ship it")
        assert "Priority: high" in output
        assert "Assignee: Bob Smith" in output
        assert len(await api.get_all()) == 5

    @classmethod
    async def test_create_invalid_form(cls, api: TasksApi) -> None:
        """Test that an invalid form fails before anything is sent."""
        with pytest.raises(ValidationError) as exc_info:
            await _run(api, "create", "--title", "")

        assert exc_info.value.errors()[0]["msg"] == "Title is required"
        assert len(await api.get_all()) == 4

    @classmethod
    async def test_update(cls, api: TasksApi) -> None:
        """Test that only the given fields change."""
        before = await api.get_by_id(3)

        output = await _run(api, "update", "3", "--status", "completed")

        assert output.startswith(f"{before.title} ✓")
        after = await api.get_by_id(3)
        assert after.priority == before.priority
        assert after.description == before.description

    @classmethod
    async def test_delete(cls, api: TasksApi) -> None:
        """Test that a deleted task can no longer be read."""
        output = await _run(api, "delete", "4")

        assert output == "Task 4 deleted"
        with pytest.raises(TasksApiError):
            await api.get_by_id(4)

    @classmethod
    async def test_delete_missing(cls, api: TasksApi) -> None:
        """Test that a failed delete raises the client error."""
        with pytest.raises(TasksApiError) as exc_info:
            await _run(api, "delete", "4242")

        assert exc_info.value.message == "Failed to delete task"

    @classmethod
    async def test_update_sends_given_fields_only(cls) -> None:
        """Test that options left out are not part of the request body."""
        bodies: list[object] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json=_TASK_JSON)

        api = _mock_api(handler)
        await _run(api, "update", "3", "--status", "completed", "--user-id", "1")
        await api.aclose()

        assert bodies == [{"status": "completed", "userId": 1}]


@pytest.mark.ui
class TestMain:
    """Tests for exit codes and printed output of the entry point."""

    @classmethod
    def _patch_api(cls, monkeypatch: pytest.MonkeyPatch, handler: Handler) -> None:
        monkeypatch.setattr(cli, "TasksApi", lambda _base_url: _mock_api(handler))

    @classmethod
    def test_success(
        cls, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that the rendered task is printed with exit code 0."""
        cls._patch_api(monkeypatch, lambda _: httpx.Response(200, json=_TASK_JSON))

        exit_code = cli.main(["show", "3"])

        assert exit_code == 0
        assert "Write API documentation ✓" in capsys.readouterr().out

    @classmethod
    def test_api_error(
        cls, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that API failures are printed to stderr with exit code 1."""
        cls._patch_api(
            monkeypatch, lambda _: httpx.Response(404, text="Task not found")
        )

        exit_code = cli.main(["show", "9"])

        assert exit_code == 1
        assert "Error: Failed to fetch task" in capsys.readouterr().err.splitlines()

    @classmethod
    def test_invalid_form(
        cls, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that every form error is printed with exit code 2."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json=_TASK_JSON)

        cls._patch_api(monkeypatch, handler)

        exit_code = cli.main(["create", "--title", "", "--user-id", "abc"])

        assert exit_code == 2
        errors = capsys.readouterr().err.splitlines()
        assert "Error: Title is required" in errors
        assert "Error: User ID must be a positive number" in errors
        assert requests == []
