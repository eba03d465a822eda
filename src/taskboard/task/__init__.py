"""Task module for Taskboard.

Provides the task CRUD pipeline: input validation, normalization into filters
and mutation sets, persistence behind a repository port, and HTTP endpoints.

Key Features:
- Filtering by status, priority and a lower bound on the creation date
- Tagged validation results for list queries, create and update payloads
- Tasks always returned joined with their assignee summary
- Plain-text client errors for invalid IDs and payloads
"""

from .exceptions import (
    AssigneeRequiredError,
    InvalidAssigneeError,
    InvalidQueryParamsError,
    InvalidTaskIdError,
    TaskIdRequiredError,
    TaskNotFoundError,
    TaskValidationError,
    TitleRequiredError,
)
from .models import Task, TaskInsert, TaskPatch, TaskRecord
from .normalizer import FilterClause, TaskFilter
from .repository import SQLTaskRepository, TaskRepository, get_task_repository
from .router import router
from .schemas import TaskCreate, TaskQuery, TaskUpdate
from .service import (
    create_task_svc,
    delete_task_svc,
    get_task_svc,
    list_tasks_svc,
    update_task_svc,
)
from .task_priority import TaskPriority
from .task_status import TaskStatus
from .validation import Invalid, Valid, ValidationIssue, ValidationResult

__all__ = [
    "AssigneeRequiredError",
    "FilterClause",
    "Invalid",
    "InvalidAssigneeError",
    "InvalidQueryParamsError",
    "InvalidTaskIdError",
    "SQLTaskRepository",
    "Task",
    "TaskCreate",
    "TaskFilter",
    "TaskIdRequiredError",
    "TaskInsert",
    "TaskNotFoundError",
    "TaskPatch",
    "TaskPriority",
    "TaskQuery",
    "TaskRecord",
    "TaskRepository",
    "TaskStatus",
    "TaskUpdate",
    "TaskValidationError",
    "TitleRequiredError",
    "Valid",
    "ValidationIssue",
    "ValidationResult",
    "create_task_svc",
    "delete_task_svc",
    "get_task_repository",
    "get_task_svc",
    "list_tasks_svc",
    "router",
    "update_task_svc",
]
