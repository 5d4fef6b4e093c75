"""
Import tools from the community "awesome-ai" markdown list.

The README is organized as ``## Category`` sections containing
``[Name](https://...)`` list items. Every linked entry becomes a tool in
the section's category.
"""
import logging
import re
from collections.abc import Sequence
from typing import NamedTuple

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from models.category import Category
from models.tool import Tool
from services.seed_service import SeedStats
from services.upsert import find_by_key, upsert
from services.utils import slugify

logger = logging.getLogger(__name__)

LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
CATEGORY_PREFIX = "## "


class ParsedTool(NamedTuple):
    """One linked entry from the README."""

    name: str
    url: str
    category: str


def parse_readme(content: str) -> list[ParsedTool]:
    """
    Extract tools from README markdown.

    ``## `` lines set the current category; anything before the first one is
    ignored. The first markdown link on a line is the tool. Relative and
    anchor links (URL not starting with ``http``) are skipped.
    """
    tools: list[ParsedTool] = []
    category = ""
    for line in content.splitlines():
        if line.startswith(CATEGORY_PREFIX):
            category = line[len(CATEGORY_PREFIX):].strip()
            continue
        if not category:
            continue

        match = LINK_PATTERN.search(line)
        if match is None:
            continue
        name = match.group(1).strip()
        url = match.group(2).strip()
        if not url.startswith("http"):
            continue
        tools.append(ParsedTool(name=name, url=url, category=category))
    return tools


async def fetch_readme(client: httpx.AsyncClient, url: str) -> str:
    """
    Download the README text.

    Raises:
        httpx.HTTPStatusError: If the response is not 2xx.
    """
    logger.info("Fetching README from %s", url)
    response = await client.get(url, follow_redirects=True)
    response.raise_for_status()
    return response.text


async def import_parsed_tools(
    db: AsyncSession,
    parsed: Sequence[ParsedTool],
) -> SeedStats:
    """
    Upsert the categories and tools found in the README.

    Categories are keyed by slug and created with generated SEO text. Tools
    are keyed by name; a tool that already exists is left unchanged so
    curated catalog entries are never overwritten by the stub description.
    Entries whose name or category has no usable slug, or whose slug is taken
    by a differently named tool, are logged and skipped.

    Returns:
        SeedStats counting tools only (``updated`` counts existing tools).
    """
    categories = {tool.category for tool in parsed}
    logger.info("Found %d tools in %d categories", len(parsed), len(categories))

    stats = SeedStats()
    for entry in parsed:
        category_slug = slugify(entry.category)
        slug = slugify(entry.name)
        if not category_slug or not slug:
            logger.warning("Cannot derive a slug for '%s' (%s), skipping", entry.name, entry.category)
            stats.skipped.append(entry.name)
            continue

        await upsert(
            db,
            Category,
            key={"slug": category_slug},
            create={
                "name": entry.category,
                "seo_title": f"{entry.category} AI Tools",
                "seo_description": f"Best AI tools for {entry.category}",
            },
        )

        existing = await find_by_key(db, Tool, {"name": entry.name})
        if existing is None:
            clash = await find_by_key(db, Tool, {"slug": slug})
            if clash is not None:
                logger.warning(
                    "Slug '%s' for '%s' already used by tool '%s', skipping",
                    slug,
                    entry.name,
                    clash.name,
                )
                stats.skipped.append(entry.name)
                continue

        result = await upsert(
            db,
            Tool,
            key={"name": entry.name},
            create={
                "slug": slug,
                "category": category_slug,
                "description": (
                    f"AI tool for {entry.category}. Discovered in Awesome AI collection."
                ),
                "website": entry.url,
                "pricing": "Unknown",
                "verified": True,
            },
        )
        stats.record(result.created)

    logger.info(
        "Imported awesome-ai tools (%d created, %d existing, %d skipped)",
        stats.created,
        stats.updated,
        len(stats.skipped),
    )
    return stats
