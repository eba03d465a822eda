"""Helpers for tasks repository."""

from sqlalchemy import ColumnElement
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.sql.expression import SelectOfScalar

from .models import Task
from .normalizer import FilterClause, TaskFilter

__all__ = ["build_query"]


def build_query(task_filter: TaskFilter | None = None) -> SelectOfScalar[Task]:
    """Build SQL query for tasks joined with their assignee.

    Args:
        task_filter: Optional filter whose clauses are combined with AND.

    Returns:
        SQLModel *Select* query eager-loading the assignee.
    """
    query = select(Task).options(selectinload(Task.assignee))  # type: ignore[arg-type]

    if task_filter is not None and not task_filter.matches_all:
        query = query.where(*(_to_condition(c) for c in task_filter.clauses))

    return query


# -----------------------------------------------------------------------------
# Utility ---------------------------------------------------------------------
# -----------------------------------------------------------------------------


def _to_condition(clause: FilterClause) -> ColumnElement[bool]:
    """Build a SQL condition for a single filter clause.

    Args:
        clause: Filter clause naming a task column, an operator and a value.

    Returns:
        SQLAlchemy filter condition for WHERE clauses.
    """
    column = getattr(Task, clause.field)
    if clause.operator == "gte":
        return column >= clause.value
    return column == clause.value
