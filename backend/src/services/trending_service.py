"""
Trending score calculation from recent tool views.

score = views_last_7_days * 0.7 + views_last_1_day * 0.3 + newness_boost

Tools created within the last 7 days get a newness boost of 50 points.
Tools scoring at least TRENDING_THRESHOLD are flagged as trending.
"""
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.tool import Tool
from models.tool_view import ToolView

logger = logging.getLogger(__name__)

WEEK_WEIGHT = 0.7
DAY_WEIGHT = 0.3
NEWNESS_BOOST = 50.0
NEWNESS_DAYS = 7
TRENDING_THRESHOLD = 10.0
TOP_N = 10


@dataclass
class TrendingStats:
    """Statistics from a trending calculation run."""

    tools_processed: int = 0
    trending: int = 0
    # (tool name, score) for the highest scoring trending tools
    top: list[tuple[str, float]] = field(default_factory=list)

    def to_dict(self) -> dict[str, int]:
        """Convert to simple dict for logging/return."""
        return {
            "tools_processed": self.tools_processed,
            "trending": self.trending,
        }


def trending_score(views_7d: int, views_1d: int, is_new: bool) -> float:
    """Weighted view score plus the newness boost."""
    boost = NEWNESS_BOOST if is_new else 0.0
    return views_7d * WEEK_WEIGHT + views_1d * DAY_WEIGHT + boost


async def _count_views_since(db: AsyncSession, since: datetime) -> dict[int, int]:
    stmt = (
        select(ToolView.tool_id, func.count())
        .where(ToolView.created_at >= since)
        .group_by(ToolView.tool_id)
    )
    result = await db.execute(stmt)
    return {tool_id: count for tool_id, count in result.all()}


async def calculate_trending_scores(
    db: AsyncSession,
    now: datetime | None = None,
) -> TrendingStats:
    """
    Recompute trending_score and is_trending for every tool.

    View counts are aggregated with one GROUP BY query per window rather than
    per-tool counts.

    Args:
        db: Database session.
        now: Reference time for the windows. Defaults to datetime.now(UTC).
             Inject a specific time for testing boundary conditions.

    Returns:
        TrendingStats with the processed/trending counts and the top tools.
    """
    if now is None:
        now = datetime.now(UTC)

    week_ago = now - timedelta(days=NEWNESS_DAYS)
    day_ago = now - timedelta(days=1)

    views_7d = await _count_views_since(db, week_ago)
    views_1d = await _count_views_since(db, day_ago)
    result = await db.execute(select(Tool.id).where(Tool.created_at >= week_ago))
    new_tool_ids = set(result.scalars())

    result = await db.execute(select(Tool).order_by(Tool.id))
    tools = list(result.scalars())
    logger.info("Processing %d tools...", len(tools))

    stats = TrendingStats(tools_processed=len(tools))
    for tool in tools:
        week = views_7d.get(tool.id, 0)
        day = views_1d.get(tool.id, 0)
        is_new = tool.id in new_tool_ids
        score = trending_score(week, day, is_new)

        tool.trending_score = score
        tool.is_trending = score >= TRENDING_THRESHOLD
        if tool.is_trending:
            stats.trending += 1
            logger.debug(
                "Tool #%d: score=%.2f (7d=%d, 1d=%d, new=%s)",
                tool.id,
                score,
                week,
                day,
                is_new,
            )

    await db.flush()

    ranked = sorted(
        (tool for tool in tools if tool.is_trending),
        key=lambda tool: (-tool.trending_score, tool.id),
    )
    stats.top = [(tool.name, tool.trending_score) for tool in ranked[:TOP_N]]

    logger.info("%d tools are now trending", stats.trending)
    for position, (name, score) in enumerate(stats.top, start=1):
        logger.info("  %d. %s (score: %.2f)", position, name, score)
    return stats
