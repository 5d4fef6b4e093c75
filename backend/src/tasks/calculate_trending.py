"""
Recompute trending scores from recent views.

Usage:
    python -m tasks.calculate_trending

Designed to run as a cron job (e.g., hourly).
"""
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from services.trending_service import calculate_trending_scores
from tasks.runner import run_script


async def calculate_trending(db: AsyncSession, settings: Settings) -> None:  # noqa: ARG001
    """Update trending_score and is_trending for all tools."""
    await calculate_trending_scores(db)


def main() -> None:
    """Entry point for the trending calculation as a script."""
    raise SystemExit(run_script("calculate_trending", calculate_trending))


if __name__ == "__main__":
    main()
