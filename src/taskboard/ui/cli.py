"""Command line front end for the task API.

Usage:
taskboard-ui list --status pending --view list
taskboard-ui show 3
taskboard-ui create --title "Write docs" --user-id 2 --priority high
taskboard-ui update 3 --status completed
taskboard-ui delete 3
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from taskboard.config.config import settings
from taskboard.task.task_priority import TaskPriority
from taskboard.task.task_status import TaskStatus

from .api import TasksApi, TasksApiError
from .forms import CreateTaskForm
from .views import render_error, render_task_detail, render_task_list

__all__ = ["build_parser", "main", "run_command"]


_STATUSES = [status.value for status in TaskStatus]
_PRIORITIES = [priority.value for priority in TaskPriority]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per task operation."""
    parser = argparse.ArgumentParser(
        prog="taskboard-ui", description="Manage tasks from the command line."
    )
    parser.add_argument(
        "--base-url",
        default=settings.api_base_url,
        help=f"Task API base URL (default: {settings.api_base_url})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="List tasks")
    list_cmd.add_argument("--status", choices=_STATUSES)
    list_cmd.add_argument("--priority", choices=_PRIORITIES)
    list_cmd.add_argument(
        "--created-at", help="Only tasks created at or after this ISO date"
    )
    list_cmd.add_argument("--view", choices=["cards", "list"], default="cards")

    show_cmd = commands.add_parser("show", help="Show a single task")
    show_cmd.add_argument("task_id")

    create_cmd = commands.add_parser("create", help="Create a task")
    create_cmd.add_argument("--title", default="")
    create_cmd.add_argument("--description")
    create_cmd.add_argument("--status", choices=_STATUSES, default="pending")
    create_cmd.add_argument("--priority", choices=_PRIORITIES, default="medium")
    create_cmd.add_argument("--user-id", default="1")

    update_cmd = commands.add_parser("update", help="Update fields of a task")
    update_cmd.add_argument("task_id")
    update_cmd.add_argument("--title")
    update_cmd.add_argument("--description")
    update_cmd.add_argument("--status", choices=_STATUSES)
    update_cmd.add_argument("--priority", choices=_PRIORITIES)
    update_cmd.add_argument("--user-id", type=int)

    delete_cmd = commands.add_parser("delete", help="Delete a task")
    delete_cmd.add_argument("task_id")

    return parser


async def run_command(args: argparse.Namespace, api: TasksApi) -> str:
    """Execute a parsed sub-command and return the text to print.

    Raises:
        TasksApiError: If the API rejects the request.
        ValidationError: If the create form is invalid.
    """
    match args.command:
        case "list":
            tasks = await api.get_all({
                "status": args.status,
                "priority": args.priority,
                "createdAt": args.created_at,
            })
            return render_task_list(tasks, args.view)
        case "show":
            return render_task_detail(await api.get_by_id(args.task_id))
        case "create":
            form = CreateTaskForm(
                title=args.title,
                description=args.description,
                status=args.status,
                priority=args.priority,
                user_id=args.user_id,
            )
            return render_task_detail(await api.create(form.to_payload()))
        case "update":
            changes = {
                "title": args.title,
                "description": args.description,
                "status": args.status,
                "priority": args.priority,
                "userId": args.user_id,
            }
            payload = {k: v for k, v in changes.items() if v is not None}
            return render_task_detail(await api.update(args.task_id, payload))
        case "delete":
            await api.delete(args.task_id)
            return f"Task {args.task_id} deleted"
        case _:
            raise ValueError(f"Unknown command: {args.command}")


async def _run(args: argparse.Namespace) -> str:
    async with TasksApi(args.base_url) as api:
        return await run_command(args, api)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of ``taskboard-ui``.

    Returns:
        Exit code: 0 on success, 1 on API errors, 2 on invalid form input.
    """
    args = build_parser().parse_args(argv)

    try:
        output = asyncio.run(_run(args))
    except TasksApiError as e:
        print(render_error(e.message), file=sys.stderr)  # noqa: T201
        return 1
    except ValidationError as e:
        for error in e.errors():
            print(render_error(error["msg"]), file=sys.stderr)  # noqa: T201
        return 2

    logger.debug("Command finished", command=args.command)
    print(output)  # noqa: T201
    return 0
