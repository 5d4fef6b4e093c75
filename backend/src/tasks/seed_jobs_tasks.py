"""
Seed the job and task taxonomies.

Usage:
    python -m tasks.seed_jobs_tasks
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog import JOBS, TASKS
from core.config import Settings
from services.seed_service import seed_jobs, seed_tasks
from tasks.runner import run_script

logger = logging.getLogger(__name__)


async def seed_jobs_and_tasks(db: AsyncSession, settings: Settings) -> None:  # noqa: ARG001
    """Upsert all jobs, then all tasks."""
    job_stats = await seed_jobs(db, JOBS)
    task_stats = await seed_tasks(db, TASKS)
    logger.info(
        "Job/task seeding complete: jobs=%s tasks=%s",
        job_stats.to_dict(),
        task_stats.to_dict(),
    )


def main() -> None:
    """Entry point for seeding jobs and tasks as a script."""
    raise SystemExit(run_script("seed_jobs_tasks", seed_jobs_and_tasks))


if __name__ == "__main__":
    main()
