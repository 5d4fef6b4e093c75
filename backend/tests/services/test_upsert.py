"""Tests for the natural-key upsert helper."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.category import Category
from models.tag import Tag
from services.upsert import find_by_key, upsert


async def count_tags(db: AsyncSession) -> int:
    """Count all tag rows."""
    result = await db.execute(select(func.count()).select_from(Tag))
    return result.scalar_one()


async def test_upsert_creates_when_absent(db_session: AsyncSession) -> None:
    """First call inserts with key and create values."""
    result = await upsert(
        db_session,
        Tag,
        key={"name": "chatbot"},
        create={"category": "ai-chat-assistant"},
    )

    assert result.created is True
    assert result.record.id is not None
    assert result.record.name == "chatbot"
    assert result.record.category == "ai-chat-assistant"


async def test_upsert_updates_when_present(db_session: AsyncSession) -> None:
    """Second call finds the row and applies the update values."""
    first = await upsert(db_session, Tag, key={"name": "chatbot"}, create={"category": "old"})
    second = await upsert(
        db_session,
        Tag,
        key={"name": "chatbot"},
        create={"category": "ignored"},
        update={"category": "new"},
    )

    assert second.created is False
    assert second.record.id == first.record.id
    assert second.record.category == "new"
    assert await count_tags(db_session) == 1


async def test_upsert_without_update_leaves_row(db_session: AsyncSession) -> None:
    """No update payload means the existing row is returned untouched."""
    await upsert(db_session, Tag, key={"name": "llm"}, create={"category": "llm-models"})
    result = await upsert(db_session, Tag, key={"name": "llm"}, create={"category": "other"})

    assert result.created is False
    assert result.record.category == "llm-models"


async def test_upsert_key_wins_over_create(db_session: AsyncSession) -> None:
    """A key column repeated in create cannot change the natural key."""
    result = await upsert(
        db_session,
        Category,
        key={"slug": "seo"},
        create={"name": "SEO", "slug": "something-else"},
    )
    assert result.record.slug == "seo"


async def test_upsert_empty_key_rejected(db_session: AsyncSession) -> None:
    """An upsert without a natural key is a programming error."""
    with pytest.raises(ValueError, match="natural key"):
        await upsert(db_session, Tag, key={})


async def test_upsert_conflict_on_other_unique_column(db_session: AsyncSession) -> None:
    """A clash on a non-key unique column propagates as IntegrityError."""
    await upsert(db_session, Category, key={"slug": "seo"}, create={"name": "SEO"})
    with pytest.raises(IntegrityError):
        await upsert(db_session, Category, key={"slug": "seo-2"}, create={"name": "SEO"})


async def test_find_by_key(db_session: AsyncSession) -> None:
    """find_by_key returns the row or None."""
    await upsert(db_session, Tag, key={"name": "voice"})

    found = await find_by_key(db_session, Tag, {"name": "voice"})
    missing = await find_by_key(db_session, Tag, {"name": "nope"})

    assert found is not None
    assert found.name == "voice"
    assert missing is None
