"""
Connect tools to jobs, tasks and tags by category.

Usage:
    python -m tasks.assign_tools
    CATEGORY_MATCH_MODE=keyword python -m tasks.assign_tools

In exact mode (default) a tool is connected to the jobs, tasks and tags whose
category equals its own. Keyword mode also applies the curated
category -> job/task/tag lists in catalog.category_map.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog import CATEGORY_TO_JOBS, CATEGORY_TO_TAGS, CATEGORY_TO_TASKS
from core.config import Settings
from core.matching import CategoryMatchMode
from services.relationship_service import (
    AssignmentStats,
    assign_jobs_and_tasks,
    assign_tags_by_category,
)
from tasks.runner import run_script

logger = logging.getLogger(__name__)


async def assign_relationships(
    db: AsyncSession,
    mode: CategoryMatchMode,
) -> tuple[AssignmentStats, AssignmentStats]:
    """Run job/task assignment, then tag assignment."""
    taxonomy_stats = await assign_jobs_and_tasks(
        db,
        mode,
        job_keywords=CATEGORY_TO_JOBS,
        task_keywords=CATEGORY_TO_TASKS,
    )
    tag_stats = await assign_tags_by_category(db, mode, tag_keywords=CATEGORY_TO_TAGS)
    return taxonomy_stats, tag_stats


async def assign_tools(db: AsyncSession, settings: Settings) -> None:
    """Assign relationships using the configured match mode."""
    taxonomy_stats, tag_stats = await assign_relationships(db, settings.category_match_mode)
    logger.info(
        "Assignment complete: jobs=%d tasks=%d tags=%d new edges",
        taxonomy_stats.edges_by_kind.get("jobs", 0),
        taxonomy_stats.edges_by_kind.get("tasks", 0),
        tag_stats.edges_by_kind.get("tags", 0),
    )


def main() -> None:
    """Entry point for assigning relationships as a script."""
    raise SystemExit(run_script("assign_tools", assign_tools))


if __name__ == "__main__":
    main()
