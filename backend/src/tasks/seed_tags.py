"""
Seed tags and the hand-picked tool/tag pairs.

Usage:
    python -m tasks.seed_tags

Run after tasks.seed_tools; pairs naming a tool that has not been seeded are
logged and skipped.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog import TAG_ASSIGNMENTS, TAGS
from core.config import Settings
from services.relationship_service import connect_tool_tags
from services.seed_service import seed_tags
from tasks.runner import run_script

logger = logging.getLogger(__name__)


async def seed_catalog_tags(db: AsyncSession, settings: Settings) -> None:  # noqa: ARG001
    """Upsert tags, then connect the explicit assignments."""
    await seed_tags(db, TAGS)
    stats = await connect_tool_tags(db, TAG_ASSIGNMENTS)
    logger.info("Tag seeding complete: %s", stats.to_dict())


def main() -> None:
    """Entry point for seeding tags as a script."""
    raise SystemExit(run_script("seed_tags", seed_catalog_tags))


if __name__ == "__main__":
    main()
