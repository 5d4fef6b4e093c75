"""
Seed categories and the tool catalog.

Usage:
    python -m tasks.seed_tools

Categories are written first so every tool's category exists. Re-running
refreshes existing rows instead of duplicating them.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog import CATEGORIES, build_tool_records
from core.config import Settings
from services.seed_service import seed_categories, seed_tools, validate_catalog
from tasks.runner import run_script

logger = logging.getLogger(__name__)


async def seed_catalog_tools(db: AsyncSession, settings: Settings) -> None:  # noqa: ARG001
    """Validate, then upsert categories and tools."""
    tools = build_tool_records()
    validate_catalog(CATEGORIES, tools)
    await seed_categories(db, CATEGORIES)
    stats = await seed_tools(db, tools)
    logger.info("Tool seeding complete: %s", stats.to_dict())


def main() -> None:
    """Entry point for seeding tools as a script."""
    raise SystemExit(run_script("seed_tools", seed_catalog_tools))


if __name__ == "__main__":
    main()
