"""Common test fixtures for the application."""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

os.environ.setdefault("ENV", "testing")
os.environ.setdefault("SEED_DB_ON_START", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.app import app
from taskboard.config.db import enable_sqlite_foreign_keys, get_session
from taskboard.config.seed import seed_db


@pytest.fixture(name="test_engine")
async def test_engine_fixture(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a seeded SQLite database per test.

    Returns:
        AsyncEngine: Engine with foreign keys enforced.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'taskboard.db'}",
        poolclass=NullPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSession(engine, expire_on_commit=False) as session:
        await seed_db(session)

    yield engine
    await engine.dispose()


@pytest.fixture(name="client")
def client_fixture(test_engine: AsyncEngine) -> Generator[TestClient]:
    """Create a test client for the FastAPI app.

    Server errors are returned as responses so 500 handling can be asserted.

    Args:
        test_engine: Engine of the per-test database.

    Returns:
        TestClient: Configured FastAPI test client.
    """

    async def get_session_override() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(test_engine, expire_on_commit=False) as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(
        app, base_url="http://testserver", raise_server_exceptions=False
    )  # NOSONAR
    yield client

    app.dependency_overrides.clear()
