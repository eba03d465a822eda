"""Task models."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Annotated, Any, Optional

import sqlalchemy as sa
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from taskboard.user.models import AssigneeSummary

from .task_priority import TaskPriority
from .task_status import TaskStatus

if TYPE_CHECKING:
    from taskboard.user.models import User

__all__ = ["Task", "TaskInsert", "TaskPatch", "TaskRecord"]


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on read
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def _enum_values(enum_cls: type) -> list[str]:
    return [member.value for member in enum_cls]  # type: ignore[attr-defined]


class Task(SQLModel, table=True):
    """Task model."""

    __tablename__ = "tasks"

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the task.",
    )

    title: str = Field(description="Title of the task.")

    description: str | None = Field(
        default=None, sa_type=sa.Text, description="Optional description of the task."
    )

    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        sa_type=sa.Enum(
            TaskStatus, name="task_status", values_callable=_enum_values
        ),
        index=True,
        description="Current workflow status of the task.",
    )

    priority: TaskPriority = Field(
        default=TaskPriority.MEDIUM,
        sa_type=sa.Enum(
            TaskPriority, name="task_priority", values_callable=_enum_values
        ),
        index=True,
        description="Priority of the task.",
    )

    user_id: int = Field(
        foreign_key="users.id",
        index=True,
        description="ID of the user the task is assigned to.",
    )

    assignee: Optional["User"] = Relationship(back_populates="tasks")

    created_at: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True), insert_default=_utcnow, nullable=False
        ),
        description="Timestamp when the task was created.",
    )

    updated_at: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True),
            insert_default=_utcnow,
            onupdate=_utcnow,
            nullable=False,
        ),
        description="Timestamp when the task was last updated.",
    )


class TaskRecord(BaseModel):
    """Immutable task read from the store, joined with its assignee."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    user_id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
    assignee: AssigneeSummary | None = None

    @classmethod
    def from_row(cls, task: Task) -> "TaskRecord":
        """Build a record from a loaded row with its assignee relationship."""
        assignee = (
            AssigneeSummary.model_validate(task.assignee)
            if task.assignee is not None
            else None
        )
        return cls(
            id=task.id,  # type: ignore[arg-type]
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            user_id=task.user_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
            assignee=assignee,
        )


class TaskInsert(BaseModel):
    """Values for a new task row with defaults applied."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    user_id: int


class TaskPatch(BaseModel):
    """Partial task update. Only explicitly set fields are applied."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    user_id: int | None = None

    def changes(self) -> dict[str, Any]:
        """Return the fields that were explicitly set."""
        return self.model_dump(exclude_unset=True)
