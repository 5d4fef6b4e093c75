"""Service layer for writing the static catalog into the database."""
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.security import hash_password
from models.category import Category
from models.job import Job
from models.tag import Tag
from models.task import Task
from models.tool import Tool
from models.user import User, UserRole
from schemas.catalog import (
    CategoryRecord,
    JobRecord,
    SluggedRecord,
    TagRecord,
    TaskRecord,
    ToolRecord,
)
from services.exceptions import CatalogIntegrityError, UnknownCategoryError
from services.upsert import upsert

logger = logging.getLogger(__name__)


@dataclass
class SeedStats:
    """Statistics from one seeding step."""

    created: int = 0
    updated: int = 0
    skipped: list[str] = field(default_factory=list)

    def record(self, created: bool) -> None:
        """Count one upsert."""
        if created:
            self.created += 1
        else:
            self.updated += 1

    def to_dict(self) -> dict[str, int]:
        """Convert to simple dict for logging/return."""
        return {
            "created": self.created,
            "updated": self.updated,
            "skipped": len(self.skipped),
        }


def _check_unique(records: Sequence[SluggedRecord], kind: str) -> None:
    seen_names: set[str] = set()
    seen_slugs: set[str] = set()
    for record in records:
        if record.name in seen_names:
            raise CatalogIntegrityError(f"Duplicate {kind} name '{record.name}'")
        if record.slug in seen_slugs:
            raise CatalogIntegrityError(
                f"Duplicate {kind} slug '{record.slug}' (from '{record.name}')",
            )
        seen_names.add(record.name)
        seen_slugs.add(record.slug)


def validate_catalog(
    categories: Sequence[CategoryRecord],
    tools: Sequence[ToolRecord],
    jobs: Sequence[JobRecord] = (),
    tasks: Sequence[TaskRecord] = (),
    tags: Sequence[TagRecord] = (),
) -> None:
    """
    Check the static catalog before anything is written.

    Raises:
        CatalogIntegrityError: If two records of one kind share a name or slug.
        UnknownCategoryError: If a tool, job, task or tag names a category that
            is not in ``categories``.
    """
    _check_unique(categories, "category")
    _check_unique(tools, "tool")
    _check_unique(jobs, "job")
    _check_unique(tasks, "task")

    tag_names = [tag.name for tag in tags]
    if len(tag_names) != len(set(tag_names)):
        raise CatalogIntegrityError("Duplicate tag names in catalog")

    known = {category.slug for category in categories}
    for record in (*tools, *jobs, *tasks, *tags):
        if record.category is not None and record.category not in known:
            raise UnknownCategoryError(record.category, record.name)


async def seed_categories(
    db: AsyncSession,
    categories: Sequence[CategoryRecord],
) -> SeedStats:
    """Upsert categories by slug, refreshing name and featured flag."""
    stats = SeedStats()
    for record in categories:
        columns = record.to_columns()
        del columns["slug"]
        result = await upsert(
            db,
            Category,
            key={"slug": record.slug},
            create={"name": record.name, **columns},
            update={"name": record.name, "featured": record.featured},
        )
        stats.record(result.created)
    logger.info(
        "Seeded %d categories (%d created, %d updated)",
        len(categories),
        stats.created,
        stats.updated,
    )
    return stats


async def seed_tools(db: AsyncSession, tools: Sequence[ToolRecord]) -> SeedStats:
    """
    Upsert tools by name.

    Re-running refreshes every catalog field. Tools whose category has not
    been seeded are logged and skipped.
    """
    result = await db.execute(select(Category.slug))
    known_categories = set(result.scalars())

    stats = SeedStats()
    for record in tools:
        if record.category not in known_categories:
            logger.warning(
                "Category '%s' not found for tool '%s', skipping",
                record.category,
                record.name,
            )
            stats.skipped.append(record.name)
            continue
        columns = record.to_columns()
        result = await upsert(
            db,
            Tool,
            key={"name": record.name},
            create=columns,
            update=columns,
        )
        stats.record(result.created)
    logger.info(
        "Seeded tools (%d created, %d updated, %d skipped)",
        stats.created,
        stats.updated,
        len(stats.skipped),
    )
    return stats


async def _seed_taxonomy(
    db: AsyncSession,
    model: type[Job] | type[Task],
    records: Sequence[JobRecord] | Sequence[TaskRecord],
) -> SeedStats:
    stats = SeedStats()
    for record in records:
        columns = record.to_columns()
        result = await upsert(
            db,
            model,
            key={"name": record.name},
            create=columns,
            update=columns,
        )
        stats.record(result.created)
    logger.info(
        "Seeded %d %s (%d created, %d updated)",
        len(records),
        model.__tablename__,
        stats.created,
        stats.updated,
    )
    return stats


async def seed_jobs(db: AsyncSession, jobs: Sequence[JobRecord]) -> SeedStats:
    """Upsert jobs by name."""
    return await _seed_taxonomy(db, Job, jobs)


async def seed_tasks(db: AsyncSession, tasks: Sequence[TaskRecord]) -> SeedStats:
    """Upsert tasks by name."""
    return await _seed_taxonomy(db, Task, tasks)


async def seed_tags(db: AsyncSession, tags: Sequence[TagRecord]) -> SeedStats:
    """Upsert tags by name, refreshing their category label."""
    stats = SeedStats()
    for record in tags:
        result = await upsert(
            db,
            Tag,
            key={"name": record.name},
            create={"category": record.category},
            update={"category": record.category},
        )
        stats.record(result.created)
    logger.info(
        "Seeded %d tags (%d created, %d updated)",
        len(tags),
        stats.created,
        stats.updated,
    )
    return stats


async def seed_admin_user(
    db: AsyncSession,
    email: str,
    password: str,
    name: str = "Admin User",
) -> User:
    """
    Upsert the admin account by email.

    An existing account is promoted to ADMIN and its password replaced, so
    re-running the script also resets a forgotten admin password.
    """
    email = email.strip().lower()
    password_hash = hash_password(password)
    result = await upsert(
        db,
        User,
        key={"email": email},
        create={"name": name, "role": UserRole.ADMIN.value, "password_hash": password_hash},
        update={"role": UserRole.ADMIN.value, "password_hash": password_hash},
    )
    logger.info(
        "%s admin user %s (id=%s)",
        "Created" if result.created else "Updated",
        email,
        result.record.id,
    )
    return result.record
