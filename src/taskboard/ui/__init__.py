"""Command line presentation layer for the task API."""

from .api import TasksApi, TasksApiError
from .cli import main
from .forms import CreateTaskForm
from .views import render_error, render_task_detail, render_task_list

__all__ = [
    "CreateTaskForm",
    "TasksApi",
    "TasksApiError",
    "main",
    "render_error",
    "render_task_detail",
    "render_task_list",
]
