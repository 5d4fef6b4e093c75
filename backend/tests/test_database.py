"""Tests for database connection and session helpers."""
import pytest
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from db.session import create_store, open_store, transaction
from models.tag import Tag


async def test_database_connection(db_session: AsyncSession) -> None:
    """Test that we can connect to the database."""
    result = await db_session.execute(text("SELECT 1"))
    assert result.scalar() == 1


async def test_database_session_is_async(db_session: AsyncSession) -> None:
    """Test that the session is an async session."""
    assert isinstance(db_session, AsyncSession)


async def test_create_store_uses_settings(settings: Settings) -> None:
    """Engine URL and echo flag come from settings."""
    store = create_store(settings.model_copy(update={"echo_sql": True}))
    try:
        assert store.engine.url.drivername == "sqlite+aiosqlite"
        assert store.engine.echo is True
    finally:
        await store.dispose()


async def test_transaction_commits(settings: Settings) -> None:
    """Work inside transaction() is visible to later sessions."""
    async with open_store(settings) as store:
        async with transaction(store) as session:
            session.add(Tag(name="kept"))

        async with store.session_factory() as session:
            names = list((await session.execute(select(Tag.name))).scalars())
    assert names == ["kept"]


async def test_transaction_rolls_back_and_reraises(settings: Settings) -> None:
    """An exception inside transaction() discards the work and propagates."""
    async with open_store(settings) as store:
        with pytest.raises(RuntimeError):
            async with transaction(store) as session:
                session.add(Tag(name="discarded"))
                await session.flush()
                raise RuntimeError("boom")

        async with store.session_factory() as session:
            names = list((await session.execute(select(Tag.name))).scalars())
    assert names == []
