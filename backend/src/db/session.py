"""Async SQLAlchemy engine and session factory for seed scripts."""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import Settings
from models.base import Base


@dataclass
class Store:
    """Backing-store handle for one script run: engine plus session factory."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]

    async def create_schema(self) -> None:
        """Create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self.engine.dispose()


def create_store(settings: Settings) -> Store:
    """Build the engine and session factory from settings."""
    engine = create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_pre_ping=True,
    )
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return Store(engine=engine, session_factory=session_factory)


@asynccontextmanager
async def open_store(settings: Settings) -> AsyncGenerator[Store]:
    """
    Yield a store handle and dispose of its engine on exit.

    The engine is released whether the body succeeds or raises, so a failed
    seed run never leaves connections open.
    """
    store = create_store(settings)
    try:
        if settings.create_schema:
            await store.create_schema()
        yield store
    finally:
        await store.dispose()


@asynccontextmanager
async def transaction(store: Store) -> AsyncGenerator[AsyncSession]:
    """
    Yield a session whose work is committed on success and rolled back on error.

    Seed services only flush; the single commit happens here so a run is
    atomic.
    """
    async with store.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
