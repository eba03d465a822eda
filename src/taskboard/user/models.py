"""User models."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from taskboard.task.models import Task

__all__ = ["AssigneeSummary", "User"]


class User(SQLModel, table=True):
    """User model. Users are referenced by tasks but never own them."""

    __tablename__ = "users"

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the user.",
    )

    name: str = Field(min_length=1, description="Display name of the user.")

    email: str = Field(description="Email address of the user.")

    active: bool = Field(default=True, description="Whether the user is active.")

    tasks: list["Task"] = Relationship(back_populates="assignee")


class AssigneeSummary(BaseModel):
    """Joined summary of the user a task is assigned to."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    name: str
    email: str
