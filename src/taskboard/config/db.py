"""Database connection and session management."""

from collections.abc import AsyncGenerator
from typing import Any, Final

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .config import settings

__all__ = ["create_engine", "enable_sqlite_foreign_keys", "engine", "get_session"]


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores REFERENCES clauses unless the pragma is set per connection.

    Args:
        async_engine: Engine whose connections should enforce foreign keys.
    """
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection: Any, _connection_record: Any) -> None:  # noqa: ANN401
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine(db_url: str) -> AsyncEngine:
    """Create the async engine for the configured database.

    Args:
        db_url: SQLAlchemy database URL with an async driver.

    Returns:
        AsyncEngine with foreign keys enforced.
    """
    if db_url.startswith("sqlite"):
        kwargs: dict[str, Any] = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": settings.db_timeout,
            },
        }
    else:
        kwargs = {
            "pool_timeout": settings.db_pool_timeout,
            "pool_size": settings.db_pool_size,
            "pool_pre_ping": settings.db_pool_pre_ping,
            "max_overflow": settings.db_max_overflow,
            "pool_recycle": settings.db_pool_recycle,
        }

    async_engine = create_async_engine(
        db_url, echo=settings.db_logging, future=settings.db_future, **kwargs
    )
    enable_sqlite_foreign_keys(async_engine)
    return async_engine


engine: Final = create_engine(settings.db_url)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Get session for database operations."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
