"""TaskPriority model for tasks."""

from enum import StrEnum

__all__ = ["TaskPriority"]


class TaskPriority(StrEnum):
    """Priority of a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
