"""
Full seed run.

Usage:
    python -m tasks.seed_all

Order matters:
1. Catalog validation (nothing is written if the static data is inconsistent)
2. Categories and tools
3. Jobs and tasks
4. Tags and explicit tool/tag pairs
5. Admin user
6. Category-based relationship assignment

Everything runs in one transaction, so a failure leaves the database as it was.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog import CATEGORIES, JOBS, TAG_ASSIGNMENTS, TAGS, TASKS, build_tool_records
from core.config import Settings
from services.relationship_service import connect_tool_tags
from services.seed_service import (
    seed_admin_user,
    seed_categories,
    seed_jobs,
    seed_tags,
    seed_tasks,
    seed_tools,
    validate_catalog,
)
from tasks.assign_tools import assign_relationships
from tasks.runner import run_script

logger = logging.getLogger(__name__)


async def seed_everything(db: AsyncSession, settings: Settings) -> None:
    """Run every seed step in dependency order."""
    tools = build_tool_records()
    validate_catalog(CATEGORIES, tools, JOBS, TASKS, TAGS)

    await seed_categories(db, CATEGORIES)
    await seed_tools(db, tools)
    await seed_jobs(db, JOBS)
    await seed_tasks(db, TASKS)
    await seed_tags(db, TAGS)
    await connect_tool_tags(db, TAG_ASSIGNMENTS)
    await seed_admin_user(
        db,
        email=settings.admin_email,
        password=settings.admin_password,
        name=settings.admin_name,
    )
    taxonomy_stats, tag_stats = await assign_relationships(db, settings.category_match_mode)
    logger.info(
        "Seeding complete: %d job/task edges and %d tag edges added",
        taxonomy_stats.edges_created,
        tag_stats.edges_created,
    )


def main() -> None:
    """Entry point for the full seed run as a script."""
    raise SystemExit(run_script("seed_all", seed_everything))


if __name__ == "__main__":
    main()
