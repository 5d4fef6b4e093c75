"""Create-or-update writes keyed by a natural key."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


@dataclass
class UpsertResult(Generic[ModelT]):
    """The persisted row and whether this call inserted it."""

    record: ModelT
    created: bool


async def find_by_key(
    db: AsyncSession,
    model: type[ModelT],
    key: Mapping[str, Any],
) -> ModelT | None:
    """Return the row whose natural-key columns equal ``key``, or None."""
    result = await db.execute(select(model).filter_by(**key))
    return result.scalar_one_or_none()


async def upsert(
    db: AsyncSession,
    model: type[ModelT],
    *,
    key: Mapping[str, Any],
    create: Mapping[str, Any] | None = None,
    update: Mapping[str, Any] | None = None,
) -> UpsertResult[ModelT]:
    """
    Return the row for ``key``, creating it if absent.

    Args:
        db: Database session.
        model: Model class to write.
        key: Natural-key columns and values (e.g. ``{"email": ...}``).
        create: Extra column values used only when inserting.
        update: Column values applied to an existing row. None or empty leaves
            the row untouched.

    Returns:
        UpsertResult with the row and ``created=True`` if it was inserted.

    Raises:
        sqlalchemy.exc.IntegrityError: If the flush violates a constraint, e.g.
            another unique column already holds the value being written.
    """
    if not key:
        raise ValueError(f"Upsert of {model.__name__} needs a natural key")

    record = await find_by_key(db, model, key)
    if record is not None:
        if update:
            for column, value in update.items():
                setattr(record, column, value)
            await db.flush()
        return UpsertResult(record=record, created=False)

    record = model(**{**(create or {}), **key})
    db.add(record)
    await db.flush()
    return UpsertResult(record=record, created=True)
