"""Tests for the awesome-ai README importer."""
import httpx
import pytest
import respx
from httpx import Response
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.category import Category
from models.tool import Tool
from services.awesome_ai_service import (
    ParsedTool,
    fetch_readme,
    import_parsed_tools,
    parse_readme,
)

README_URL = "https://example.com/awesome-ai/readme.md"

README = """# Awesome AI

A curated list. See [contributing](CONTRIBUTING.md) or [the site](https://awesome.example).

## Image Generators

- [Leonardo AI](https://leonardo.ai) - Art generator.
- [Local Docs](#local-docs) - anchor, not a tool.
- Plain line without a link.

## Writing & Web SEO

* [Jasper](https://jasper.ai) and [Copy.ai](https://copy.ai) on one line.
- [  Spaced Name  ](  https://spaced.example  )
"""


class TestParseReadme:
    """Tests for parse_readme."""

    def test_parses_categories_and_links(self) -> None:
        """Headers set the category; one tool per linked line."""
        assert parse_readme(README) == [
            ParsedTool("Leonardo AI", "https://leonardo.ai", "Image Generators"),
            ParsedTool("Jasper", "https://jasper.ai", "Writing & Web SEO"),
            ParsedTool("Spaced Name", "https://spaced.example", "Writing & Web SEO"),
        ]

    def test_links_before_first_header_ignored(self) -> None:
        """Links outside any category section are not tools."""
        assert parse_readme("[Intro](https://intro.example)\n") == []

    def test_subheaders_do_not_change_category(self) -> None:
        """Only level-two headers start a category."""
        content = "## Video\n### Editing\n- [Runway](https://runway.com)\n"
        assert parse_readme(content) == [ParsedTool("Runway", "https://runway.com", "Video")]

    def test_empty(self) -> None:
        """Empty content yields no tools."""
        assert parse_readme("") == []


class TestFetchReadme:
    """Tests for fetch_readme."""

    @pytest.fixture
    def mock_readme(self) -> respx.MockRouter:
        """Mock the README host."""
        with respx.mock(assert_all_called=False) as respx_mock:
            yield respx_mock

    async def test_returns_text(self, mock_readme: respx.MockRouter) -> None:
        """A 200 response body is returned as text."""
        mock_readme.get(README_URL).mock(return_value=Response(200, text=README))

        async with httpx.AsyncClient() as client:
            content = await fetch_readme(client, README_URL)

        assert content == README

    async def test_error_status_raises(self, mock_readme: respx.MockRouter) -> None:
        """A non-2xx response raises HTTPStatusError."""
        mock_readme.get(README_URL).mock(return_value=Response(404))

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError):
                await fetch_readme(client, README_URL)


class TestImportParsedTools:
    """Tests for import_parsed_tools."""

    async def test_creates_categories_and_tools(self, db_session: AsyncSession) -> None:
        """New categories get SEO text; new tools get the stub description."""
        stats = await import_parsed_tools(db_session, parse_readme(README))

        assert stats.created == 3
        category = (
            await db_session.execute(select(Category).where(Category.slug == "writing-web-seo"))
        ).scalar_one()
        assert category.name == "Writing & Web SEO"
        assert category.seo_title == "Writing & Web SEO AI Tools"
        assert category.seo_description == "Best AI tools for Writing & Web SEO"

        tool = (await db_session.execute(select(Tool).where(Tool.name == "Jasper"))).scalar_one()
        assert tool.slug == "jasper"
        assert tool.category == "writing-web-seo"
        assert tool.website == "https://jasper.ai"
        assert tool.pricing == "Unknown"
        assert tool.verified is True
        assert tool.description == (
            "AI tool for Writing & Web SEO. Discovered in Awesome AI collection."
        )

    async def test_existing_tool_left_unchanged(self, db_session: AsyncSession) -> None:
        """Curated tools keep their fields; existing categories keep theirs."""
        db_session.add(Category(name="Image Generators", slug="image-generators", seo_title="Curated"))
        db_session.add(
            Tool(
                name="Leonardo AI",
                slug="leonardo-ai",
                category="image-generators",
                description="Curated description",
                website="https://app.leonardo.ai",
            ),
        )
        await db_session.flush()

        stats = await import_parsed_tools(
            db_session,
            [ParsedTool("Leonardo AI", "https://leonardo.ai", "Image Generators")],
        )

        assert stats.to_dict() == {"created": 0, "updated": 1, "skipped": 0}
        tool = (await db_session.execute(select(Tool))).scalar_one()
        assert tool.description == "Curated description"
        assert tool.website == "https://app.leonardo.ai"
        category = (await db_session.execute(select(Category))).scalar_one()
        assert category.seo_title == "Curated"

    async def test_rerun_creates_no_duplicates(self, db_session: AsyncSession) -> None:
        """Importing twice leaves one row per tool and category."""
        parsed = parse_readme(README)
        await import_parsed_tools(db_session, parsed)
        stats = await import_parsed_tools(db_session, parsed)

        assert stats.created == 0
        tools = (await db_session.execute(select(func.count()).select_from(Tool))).scalar_one()
        categories = (
            await db_session.execute(select(func.count()).select_from(Category))
        ).scalar_one()
        assert tools == 3
        assert categories == 2

    async def test_unusable_entries_skipped(self, db_session: AsyncSession) -> None:
        """Entries without a slug, or clashing with another tool's slug, are skipped."""
        stats = await import_parsed_tools(
            db_session,
            [
                ParsedTool("Murf AI", "https://murf.ai", "Text To Speech"),
                ParsedTool("Murf.AI", "https://murf.ai/other", "Text To Speech"),
                ParsedTool("★★★", "https://stars.example", "Text To Speech"),
                ParsedTool("Orphan", "https://orphan.example", "🎨"),
            ],
        )

        assert stats.created == 1
        assert stats.skipped == ["Murf.AI", "★★★", "Orphan"]
