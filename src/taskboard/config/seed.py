"""Seed the database with initial data."""

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.config.config import settings
from taskboard.task.models import Task
from taskboard.task.task_priority import TaskPriority
from taskboard.task.task_status import TaskStatus
from taskboard.user.models import User

__all__ = ["seed_db"]


USER_ALICE_ID = 1
USER_BOB_ID = 2
USER_CAROL_ID = 3


async def seed_db(session: AsyncSession) -> None:
    """Seed the database with initial sample data.

    Populates the database with a few users and tasks in every status so the
    board has something to show. Skipped when users already exist, unless the
    database is cleared on restart.

    Args:
        session: The SQLModel async database session.
    """
    if not settings.clear_db_on_restart:
        result = await session.exec(select(User))
        if result.first() is not None:
            return

    session.add_all([
        User(id=USER_ALICE_ID, name="Alice Johnson", email="alice@example.com"),
        User(id=USER_BOB_ID, name="Bob Smith", email="bob@example.com"),
        User(
            id=USER_CAROL_ID,
            name="Carol White",
            email="carol@example.com",
            active=False,
        ),
    ])
    await session.flush()

    session.add_all([
        Task(
            title="Set up project repository",
            description="Initialize the repository and CI pipeline.",
            status=TaskStatus.COMPLETED,
            priority=TaskPriority.HIGH,
            user_id=USER_ALICE_ID,
        ),
        Task(
            title="Design database schema",
            description="Model users and tasks with their relations.",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.HIGH,
            user_id=USER_BOB_ID,
        ),
        Task(
            title="Write API documentation",
            status=TaskStatus.PENDING,
            priority=TaskPriority.MEDIUM,
            user_id=USER_ALICE_ID,
        ),
        Task(
            title="Plan sprint review",
            description="Collect demo items from the team.",
            status=TaskStatus.PENDING,
            priority=TaskPriority.LOW,
            user_id=USER_CAROL_ID,
        ),
    ])
    await session.commit()
    logger.debug("Database seeded with sample users and tasks")
