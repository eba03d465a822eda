"""Text views for tasks."""

from collections.abc import Sequence
from datetime import datetime
from typing import Literal

from taskboard.task.models import TaskRecord
from taskboard.task.task_status import TaskStatus

__all__ = [
    "ViewMode",
    "render_error",
    "render_task_detail",
    "render_task_list",
]


type ViewMode = Literal["cards", "list"]

_COMPLETED_BADGE = "✓"
_CARD_WIDTH = 60


def render_task_list(tasks: Sequence[TaskRecord], mode: ViewMode = "cards") -> str:
    """Render the task list in card or list layout.

    Args:
        tasks: Tasks to show, in the order received.
        mode: ``cards`` draws a box per task, ``list`` one line per task.

    Returns:
        The rendered text, or an empty state when there are no tasks.
    """
    if not tasks:
        return "No tasks yet\nCreate your first task to get started"

    lines = ["Tasks", ""]
    if mode == "list":
        lines.extend(_list_row(task) for task in tasks)
    else:
        for task in tasks:
            lines.extend(_card(task))
    return "\n".join(lines)


def render_task_detail(task: TaskRecord) -> str:
    """Render every field of a single task."""
    lines = [_title(task), ""]

    if task.description:
        lines.extend(["Description", f"  {task.description}", ""])

    lines.extend([
        f"Status:   {_status_label(task.status)}",
        f"Priority: {task.priority}",
    ])
    if task.assignee is not None:
        lines.append(f"Assignee: {task.assignee.name} ({task.assignee.email})")
    lines.extend([
        f"Created:  {_format_date(task.created_at)}",
        f"Updated:  {_format_date(task.updated_at)}",
    ])
    return "\n".join(lines)


def render_error(message: str) -> str:
    """Render the error state."""
    return f"Error: {message}"


# -----------------------------------------------------------------------------
# Utility ---------------------------------------------------------------------
# -----------------------------------------------------------------------------


def _card(task: TaskRecord) -> list[str]:
    border = "+" + "-" * (_CARD_WIDTH - 2) + "+"
    body = [_title(task)]
    if task.description:
        body.append(task.description)
    body.append(f"[{_status_label(task.status)}] [{task.priority}]")
    return [border, *(f"| {line}" for line in body), border]


def _list_row(task: TaskRecord) -> str:
    status = _status_label(task.status)
    return f"#{task.id:<5} {_title(task):<40} {status:<12} {task.priority}"


def _title(task: TaskRecord) -> str:
    if task.status == TaskStatus.COMPLETED:
        return f"{task.title} {_COMPLETED_BADGE}"
    return task.title


def _status_label(status: TaskStatus) -> str:
    return status.value.replace("-", " ")


def _format_date(value: datetime) -> str:
    return value.strftime("%Y-%m-%d")
