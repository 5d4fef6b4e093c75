"""Pytest fixtures for testing."""
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from core.config import Settings
from models.base import Base
from models.category import Category


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """
    Create an in-memory sqlite engine with the schema applied.

    StaticPool keeps a single connection so every session sees the same
    in-memory database. Each test gets a fresh engine, which provides
    isolation without an outer rollback transaction.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create an async session bound to the test engine."""
    session_factory = async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a file-backed sqlite database.

    A file (rather than :memory:) lets separate script runs share one
    database, which the re-run tests rely on.
    """
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}",
        create_schema=True,
        admin_email="Admin@Test.com",
        admin_password="s3cret-pass",
    )


@pytest.fixture
async def category(db_session: AsyncSession) -> Category:
    """Create the chat assistant category used by most relationship tests."""
    category = Category(name="AI Chat & Assistant", slug="ai-chat-assistant")
    db_session.add(category)
    await db_session.flush()
    return category
