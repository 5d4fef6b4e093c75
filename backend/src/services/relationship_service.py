"""Service layer for wiring tools to jobs, tasks and tags by category."""
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from operator import attrgetter
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.matching import CategoryMatchMode
from models.job import Job
from models.tag import Tag
from models.task import Task
from models.tool import Tool
from schemas.catalog import TagAssignment
from services.utils import same_category, slugify

logger = logging.getLogger(__name__)

TargetT = TypeVar("TargetT", Job, Task, Tag)


@dataclass
class AssignmentStats:
    """Statistics from a relationship assignment run."""

    tools_processed: int = 0
    tools_with_matches: int = 0
    edges_created: int = 0
    already_connected: int = 0
    edges_removed: int = 0
    # Job/task slugs, tag names or tool names that were referenced but not found
    missing: set[str] = field(default_factory=set)
    edges_by_kind: dict[str, int] = field(default_factory=dict)

    def add_edges(self, kind: str, created: int, already: int) -> None:
        """Count the outcome of one connect call."""
        self.edges_created += created
        self.already_connected += already
        if created:
            self.edges_by_kind[kind] = self.edges_by_kind.get(kind, 0) + created

    def to_dict(self) -> dict[str, int]:
        """Convert to simple dict for logging/return."""
        return {
            "tools_processed": self.tools_processed,
            "tools_with_matches": self.tools_with_matches,
            "edges_created": self.edges_created,
            "already_connected": self.already_connected,
            "edges_removed": self.edges_removed,
            "missing": len(self.missing),
        }


def select_targets(
    tool_category: str | None,
    targets: Sequence[TargetT],
    *,
    mode: CategoryMatchMode,
    keyword_map: Mapping[str, Sequence[str]],
    key: Callable[[TargetT], str] = attrgetter("slug"),
) -> tuple[list[TargetT], list[str]]:
    """
    Pick the targets a tool in ``tool_category`` should be connected to.

    EXACT returns the targets whose own category equals the tool's (compared
    in slug form). KEYWORD adds the targets that ``keyword_map`` lists for the
    tool's category, looked up with ``key`` (slug for jobs/tasks, name for tags).

    Returns:
        (matches in first-seen order without duplicates, keyword-map keys with
        no corresponding target)
    """
    matches = [target for target in targets if same_category(target.category, tool_category)]
    missing: list[str] = []
    if mode is CategoryMatchMode.KEYWORD and tool_category:
        by_key = {key(target): target for target in targets}
        for wanted in keyword_map.get(slugify(tool_category), []):
            target = by_key.get(wanted)
            if target is None:
                missing.append(wanted)
            elif target not in matches:
                matches.append(target)
    return matches, missing


def connect(collection: list[TargetT], targets: Sequence[TargetT]) -> tuple[int, int]:
    """
    Append targets not already in a loaded relationship collection.

    Returns:
        (edges created, targets that were already connected)
    """
    created = 0
    already = 0
    for target in targets:
        if target in collection:
            already += 1
        else:
            collection.append(target)
            created += 1
    return created, already


def prune(collection: list[TargetT], keep: Sequence[TargetT]) -> int:
    """
    Remove targets not in ``keep`` from a loaded relationship collection.

    Returns:
        Number of edges removed.
    """
    stale = [target for target in collection if target not in keep]
    for target in stale:
        collection.remove(target)
    return len(stale)


async def _load_tools(db: AsyncSession, *relationships: str) -> list[Tool]:
    """Load all tools with the named collections eagerly loaded."""
    stmt = (
        select(Tool)
        .options(*(selectinload(getattr(Tool, name)) for name in relationships))
        .order_by(Tool.id)
        # Tools created earlier in this session may have unloaded collections
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return list(result.scalars())


def _warn_missing(kind: str, category: str | None, missing: list[str], stats: AssignmentStats) -> None:
    for wanted in missing:
        if wanted not in stats.missing:
            logger.warning(
                "%s '%s' listed for category '%s' not found, skipping",
                kind,
                wanted,
                category,
            )
            stats.missing.add(wanted)


async def assign_jobs_and_tasks(
    db: AsyncSession,
    mode: CategoryMatchMode = CategoryMatchMode.EXACT,
    job_keywords: Mapping[str, Sequence[str]] | None = None,
    task_keywords: Mapping[str, Sequence[str]] | None = None,
) -> AssignmentStats:
    """
    Connect every tool to the jobs and tasks matching its category.

    Only missing edges are added, so the assignment can re-run safely. In
    EXACT mode, edges to jobs/tasks outside the tool's category are removed,
    so a tool whose category changed loses its old connections. KEYWORD mode
    never removes edges.

    Args:
        db: Database session.
        mode: Category matching rule.
        job_keywords: Category slug -> job slugs, used in KEYWORD mode.
        task_keywords: Category slug -> task slugs, used in KEYWORD mode.

    Returns:
        AssignmentStats with per-kind edge counts.
    """
    job_keywords = job_keywords or {}
    task_keywords = task_keywords or {}

    tools = await _load_tools(db, "jobs", "tasks")
    jobs = list((await db.execute(select(Job).order_by(Job.id))).scalars())
    tasks = list((await db.execute(select(Task).order_by(Task.id))).scalars())
    logger.info(
        "Assigning %d tools to %d jobs and %d tasks (mode=%s)",
        len(tools),
        len(jobs),
        len(tasks),
        mode.value,
    )

    stats = AssignmentStats()
    for tool in tools:
        stats.tools_processed += 1
        matched_jobs, missing_jobs = select_targets(
            tool.category, jobs, mode=mode, keyword_map=job_keywords,
        )
        matched_tasks, missing_tasks = select_targets(
            tool.category, tasks, mode=mode, keyword_map=task_keywords,
        )
        _warn_missing("Job", tool.category, missing_jobs, stats)
        _warn_missing("Task", tool.category, missing_tasks, stats)
        if mode is CategoryMatchMode.EXACT:
            stats.edges_removed += prune(tool.jobs, matched_jobs)
            stats.edges_removed += prune(tool.tasks, matched_tasks)

        if not matched_jobs and not matched_tasks:
            logger.warning(
                "No jobs or tasks match category '%s' of tool '%s', skipping",
                tool.category,
                tool.name,
            )
            continue

        stats.tools_with_matches += 1
        stats.add_edges("jobs", *connect(tool.jobs, matched_jobs))
        stats.add_edges("tasks", *connect(tool.tasks, matched_tasks))

    await db.flush()
    logger.info("Job/task assignment complete: %s", stats.to_dict())
    return stats


async def assign_tags_by_category(
    db: AsyncSession,
    mode: CategoryMatchMode = CategoryMatchMode.EXACT,
    tag_keywords: Mapping[str, Sequence[str]] | None = None,
) -> AssignmentStats:
    """
    Connect every tool to the tags matching its category.

    In EXACT mode, tags outside the tool's category are disconnected, as in
    assign_jobs_and_tasks.

    Args:
        db: Database session.
        mode: Category matching rule.
        tag_keywords: Category slug -> tag names, used in KEYWORD mode.

    Returns:
        AssignmentStats; edges_by_kind has a single "tags" entry.
    """
    tag_keywords = tag_keywords or {}

    tools = await _load_tools(db, "tags")
    tags = list((await db.execute(select(Tag).order_by(Tag.id))).scalars())

    stats = AssignmentStats()
    for tool in tools:
        stats.tools_processed += 1
        matched, missing = select_targets(
            tool.category,
            tags,
            mode=mode,
            keyword_map=tag_keywords,
            key=attrgetter("name"),
        )
        _warn_missing("Tag", tool.category, missing, stats)
        if mode is CategoryMatchMode.EXACT:
            stats.edges_removed += prune(tool.tags, matched)
        if not matched:
            logger.warning(
                "No tags match category '%s' of tool '%s', skipping",
                tool.category,
                tool.name,
            )
            continue
        stats.tools_with_matches += 1
        stats.add_edges("tags", *connect(tool.tags, matched))

    await db.flush()
    logger.info("Tag assignment complete: %s", stats.to_dict())
    return stats


async def connect_tool_tags(
    db: AsyncSession,
    assignments: Sequence[TagAssignment],
) -> AssignmentStats:
    """
    Apply hand-picked tool/tag pairs.

    A tool or tag that does not exist is logged and skipped; the remaining
    pairs are still applied.
    """
    stats = AssignmentStats()
    for assignment in assignments:
        result = await db.execute(
            select(Tool)
            .where(Tool.name == assignment.tool_name)
            .options(selectinload(Tool.tags))
            .execution_options(populate_existing=True),
        )
        tool = result.scalar_one_or_none()
        if tool is None:
            logger.warning("Tool '%s' not found, skipping its tags", assignment.tool_name)
            stats.missing.add(assignment.tool_name)
            continue

        stats.tools_processed += 1
        result = await db.execute(select(Tag).where(Tag.name.in_(assignment.tag_names)))
        found = {tag.name: tag for tag in result.scalars()}
        tags = []
        for name in assignment.tag_names:
            if name in found:
                tags.append(found[name])
            else:
                logger.warning("Tag '%s' not found for tool '%s', skipping", name, tool.name)
                stats.missing.add(name)
        if not tags:
            continue

        stats.tools_with_matches += 1
        created, already = connect(tool.tags, tags)
        stats.add_edges("tags", created, already)
        for tag in tags:
            logger.info("Added tag '%s' to tool '%s'", tag.name, tool.name)

    await db.flush()
    return stats
