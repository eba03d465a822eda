"""Tasks repository."""

from typing import Annotated, Protocol

from fastapi import Depends
from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.config.db import get_session

from .models import Task, TaskInsert, TaskPatch, TaskRecord
from .normalizer import TaskFilter
from .query_builder import build_query

__all__ = ["SQLTaskRepository", "TaskRepository", "get_task_repository"]


# IDs outside this range can never match a row
_MAX_ID = 2**63 - 1


class TaskRepository(Protocol):
    """Persistence port for tasks. All reads join the assignee."""

    async def find_tasks(self, task_filter: TaskFilter) -> list[TaskRecord]: ...

    async def find_task_by_id(self, task_id: int | float) -> TaskRecord | None: ...

    async def insert_task(self, data: TaskInsert) -> TaskRecord: ...

    async def update_task(
        self, task_id: int | float, patch: TaskPatch
    ) -> TaskRecord | None: ...

    async def delete_task(self, task_id: int | float) -> bool: ...


class SQLTaskRepository:
    """Task repository backed by an async SQLModel session."""

    def __init__(self, db: AsyncSession) -> None:
        """Initialize with the session used for every statement."""
        self.db = db

    async def find_tasks(self, task_filter: TaskFilter) -> list[TaskRecord]:
        """Retrieve tasks matching the filter.

        Args:
            task_filter: AND-combined clauses, empty to match every task.

        Returns:
            Task records with assignee, in the order the store returns them.
        """
        result = await self.db.exec(build_query(task_filter))
        tasks = result.all()

        logger.debug(
            "Tasks fetched from DB", count=len(tasks), filter=str(task_filter)
        )
        return [TaskRecord.from_row(task) for task in tasks]

    async def find_task_by_id(self, task_id: int | float) -> TaskRecord | None:
        """Retrieve a task by its ID.

        Args:
            task_id: Numeric ID. Values that cannot be a row ID yield None.

        Returns:
            The task record with assignee, or None if no row matches.
        """
        task = await self._load(task_id)
        if task is None:
            return None

        logger.debug("Task loaded from DB", task_id=task.id)
        return TaskRecord.from_row(task)

    async def insert_task(self, data: TaskInsert) -> TaskRecord:
        """Persist a new task and reload it with its assignee.

        Args:
            data: Values for the new row.

        Returns:
            The stored task record.
        """
        task = Task(**data.model_dump())
        self.db.add(task)
        await self.db.flush()
        task_id = task.id
        await self.db.commit()

        logger.debug("Task saved to DB", task_id=task_id, user_id=data.user_id)
        return await self._reload(task_id)  # type: ignore[arg-type]

    async def update_task(
        self, task_id: int | float, patch: TaskPatch
    ) -> TaskRecord | None:
        """Apply a partial update to a task.

        Args:
            task_id: Numeric ID of the task.
            patch: Fields to change. Unset fields keep their value.

        Returns:
            The updated task record, or None if the task does not exist.
        """
        task = await self._fetch(task_id)
        if task is None:
            return None

        for field, value in patch.changes().items():
            setattr(task, field, value)

        await self.db.commit()

        logger.debug("Task updated", task_id=task_id, fields=list(patch.changes()))
        return await self._reload(task_id)  # type: ignore[arg-type]

    async def delete_task(self, task_id: int | float) -> bool:
        """Delete a task permanently.

        Args:
            task_id: Numeric ID of the task.

        Returns:
            True if a row was deleted, False if the task does not exist.
        """
        task = await self._fetch(task_id)
        if task is None:
            return False

        await self.db.delete(task)
        await self.db.commit()

        logger.debug("Task deleted", task_id=task_id)
        return True

    async def _fetch(self, task_id: int | float) -> Task | None:
        if not _is_row_id(task_id):
            return None
        result = await self.db.exec(select(Task).where(Task.id == task_id))
        return result.first()

    async def _load(self, task_id: int | float) -> Task | None:
        if not _is_row_id(task_id):
            return None
        statement = (
            build_query()
            .where(Task.id == task_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.exec(statement)
        return result.first()

    async def _reload(self, task_id: int) -> TaskRecord:
        task = await self._load(task_id)
        if task is None:
            raise LookupError(f"Task {task_id} vanished after write")
        return TaskRecord.from_row(task)


def _is_row_id(task_id: int | float) -> bool:
    return isinstance(task_id, int) and -_MAX_ID - 1 <= task_id <= _MAX_ID


async def get_task_repository(
    db: Annotated[AsyncSession, Depends(get_session)],
) -> TaskRepository:
    """Provide a task repository bound to the request's session."""
    return SQLTaskRepository(db)
