"""Tests for the catalog seeding service."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.security import verify_password
from models.category import Category
from models.job import Job
from models.tag import Tag
from models.task import Task
from models.tool import Tool
from models.user import User, UserRole
from schemas.catalog import CategoryRecord, JobRecord, TagRecord, TaskRecord, ToolRecord
from services.exceptions import CatalogIntegrityError, UnknownCategoryError
from services.seed_service import (
    SeedStats,
    seed_admin_user,
    seed_categories,
    seed_jobs,
    seed_tags,
    seed_tasks,
    seed_tools,
    validate_catalog,
)


CATEGORIES = [
    CategoryRecord(name="AI Chat & Assistant", featured=True),
    CategoryRecord(name="Image Generators"),
]

TOOLS = [
    ToolRecord(
        name="ChatGPT",
        category="AI Chat & Assistant",
        short_description="Chatbot",
        pricing_type=["Freemium", "Paid"],
        key_features=["Chat"],
    ),
    ToolRecord(name="Leonardo AI", category="image-generators"),
]


async def count_rows(db: AsyncSession, model: type) -> int:
    """Count rows of a model."""
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


class TestSeedStats:
    """Tests for SeedStats bookkeeping."""

    def test_record_and_to_dict(self) -> None:
        """Created and updated counts come from record()."""
        stats = SeedStats()
        stats.record(created=True)
        stats.record(created=True)
        stats.record(created=False)
        stats.skipped.append("X")

        assert stats.to_dict() == {"created": 2, "updated": 1, "skipped": 1}


class TestValidateCatalog:
    """Tests for static catalog checks."""

    def test_valid_catalog_passes(self) -> None:
        """A consistent catalog raises nothing."""
        validate_catalog(
            CATEGORIES,
            TOOLS,
            jobs=[JobRecord(name="Researcher", category="ai-chat-assistant")],
            tasks=[TaskRecord(name="Image Generation", category="image-generators")],
            tags=[TagRecord(name="chatbot", category="ai-chat-assistant"), TagRecord(name="free")],
        )

    def test_duplicate_tool_slug(self) -> None:
        """Two tool names that slugify alike are rejected."""
        tools = [
            ToolRecord(name="Murf AI", category="image-generators"),
            ToolRecord(name="Murf.AI", category="image-generators"),
        ]
        with pytest.raises(CatalogIntegrityError, match="murf-ai"):
            validate_catalog(CATEGORIES, tools)

    def test_duplicate_category_name(self) -> None:
        """Duplicate category names are rejected."""
        categories = [CategoryRecord(name="SEO"), CategoryRecord(name="SEO", slug="seo-2")]
        with pytest.raises(CatalogIntegrityError):
            validate_catalog(categories, [])

    def test_duplicate_tags(self) -> None:
        """Duplicate tag names are rejected."""
        with pytest.raises(CatalogIntegrityError):
            validate_catalog(CATEGORIES, [], tags=[TagRecord(name="free"), TagRecord(name="Free")])

    def test_unknown_tool_category(self) -> None:
        """A tool in an undeclared category is rejected."""
        tools = [ToolRecord(name="Mystery", category="Nowhere")]
        with pytest.raises(UnknownCategoryError) as exc_info:
            validate_catalog(CATEGORIES, tools)
        assert exc_info.value.category == "nowhere"
        assert exc_info.value.record_name == "Mystery"

    def test_unknown_job_category(self) -> None:
        """Jobs are checked too."""
        with pytest.raises(UnknownCategoryError):
            validate_catalog(CATEGORIES, [], jobs=[JobRecord(name="Chef", category="cooking")])


class TestSeedCategories:
    """Tests for seed_categories."""

    async def test_creates_then_updates(self, db_session: AsyncSession) -> None:
        """Re-running updates instead of duplicating."""
        first = await seed_categories(db_session, CATEGORIES)
        second = await seed_categories(
            db_session,
            [CategoryRecord(name="AI Chat & Assistant", featured=False)],
        )

        assert first.to_dict() == {"created": 2, "updated": 0, "skipped": 0}
        assert second.to_dict() == {"created": 0, "updated": 1, "skipped": 0}
        assert await count_rows(db_session, Category) == 2

        category = (
            await db_session.execute(select(Category).where(Category.slug == "ai-chat-assistant"))
        ).scalar_one()
        assert category.featured is False


class TestSeedTools:
    """Tests for seed_tools."""

    async def test_seeds_tools_with_list_fields(self, db_session: AsyncSession) -> None:
        """Tools are written with slug, category slug and JSON list columns."""
        await seed_categories(db_session, CATEGORIES)
        stats = await seed_tools(db_session, TOOLS)

        assert stats.created == 2
        tool = (await db_session.execute(select(Tool).where(Tool.name == "ChatGPT"))).scalar_one()
        assert tool.slug == "chatgpt"
        assert tool.category == "ai-chat-assistant"
        assert tool.pricing_type == ["Freemium", "Paid"]
        assert tool.key_features == ["Chat"]
        assert tool.verified is True

    async def test_rerun_refreshes_without_duplicates(self, db_session: AsyncSession) -> None:
        """Running twice keeps one row per tool and refreshes its fields."""
        await seed_categories(db_session, CATEGORIES)
        await seed_tools(db_session, TOOLS)
        changed = [TOOLS[0].model_copy(update={"short_description": "Updated"}), TOOLS[1]]
        stats = await seed_tools(db_session, changed)

        assert stats.to_dict() == {"created": 0, "updated": 2, "skipped": 0}
        assert await count_rows(db_session, Tool) == 2
        tool = (await db_session.execute(select(Tool).where(Tool.name == "ChatGPT"))).scalar_one()
        assert tool.short_description == "Updated"

    async def test_unknown_category_skipped(self, db_session: AsyncSession) -> None:
        """A tool whose category was not seeded is skipped, others still seed."""
        await seed_categories(db_session, CATEGORIES[:1])
        stats = await seed_tools(db_session, TOOLS)

        assert stats.created == 1
        assert stats.skipped == ["Leonardo AI"]
        assert await count_rows(db_session, Tool) == 1


class TestSeedTaxonomy:
    """Tests for seed_jobs, seed_tasks and seed_tags."""

    async def test_seed_jobs_idempotent(self, db_session: AsyncSession) -> None:
        """Jobs are keyed by name and refreshed on re-run."""
        jobs = [JobRecord(name="Graphic Designer", category="Image Generators", icon="🎨")]
        await seed_jobs(db_session, jobs)
        await seed_jobs(db_session, [jobs[0].model_copy(update={"icon": "🖌️"})])

        job = (await db_session.execute(select(Job))).scalar_one()
        assert job.slug == "graphic-designer"
        assert job.category == "image-generators"
        assert job.icon == "🖌️"

    async def test_seed_tasks(self, db_session: AsyncSession) -> None:
        """Tasks without a category are allowed."""
        stats = await seed_tasks(db_session, [TaskRecord(name="Translation")])

        assert stats.created == 1
        task = (await db_session.execute(select(Task))).scalar_one()
        assert task.category is None
        assert task.slug == "translation"

    async def test_seed_tags_refreshes_category(self, db_session: AsyncSession) -> None:
        """Tag category labels are refreshed on re-run."""
        await seed_tags(db_session, [TagRecord(name="chatbot")])
        stats = await seed_tags(db_session, [TagRecord(name="chatbot", category="AI Chat & Assistant")])

        assert stats.updated == 1
        tag = (await db_session.execute(select(Tag))).scalar_one()
        assert tag.category == "ai-chat-assistant"


class TestSeedAdminUser:
    """Tests for seed_admin_user."""

    async def test_creates_admin(self, db_session: AsyncSession) -> None:
        """Admin is created with a hashed password and ADMIN role."""
        user = await seed_admin_user(db_session, "Admin@FindMyAI.com", "admin")

        assert user.email == "admin@findmyai.com"
        assert user.role == UserRole.ADMIN
        assert user.name == "Admin User"
        assert user.password_hash != "admin"
        assert verify_password("admin", user.password_hash)

    async def test_twice_yields_one_admin(self, db_session: AsyncSession) -> None:
        """Upserting twice leaves a single ADMIN user with the latest password."""
        await seed_admin_user(db_session, "admin@findmyai.com", "first")
        await seed_admin_user(db_session, "admin@findmyai.com", "second")

        users = list((await db_session.execute(select(User))).scalars())
        assert len(users) == 1
        assert users[0].role == UserRole.ADMIN
        assert verify_password("second", users[0].password_hash)
        assert not verify_password("first", users[0].password_hash)

    async def test_promotes_existing_user(self, db_session: AsyncSession) -> None:
        """An existing USER account becomes ADMIN and keeps its name."""
        db_session.add(
            User(email="jo@example.com", name="Jo", role=UserRole.USER.value, password_hash="x"),
        )
        await db_session.flush()

        user = await seed_admin_user(db_session, "jo@example.com", "pw", name="Ignored")

        assert user.role == UserRole.ADMIN
        assert user.name == "Jo"
