"""Tool model - one AI tool in the FindMyAI directory."""
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, JSONList, TimestampMixin
from models.job import tool_jobs
from models.tag import tool_tags
from models.task import tool_tasks

if TYPE_CHECKING:
    from models.category import Category
    from models.job import Job
    from models.tag import Tag
    from models.task import Task
    from models.tool_view import ToolView


class Tool(Base, TimestampMixin):
    """Tool model - catalog entry with descriptive fields and taxonomy links."""

    __tablename__ = "tools"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    category: Mapped[str | None] = mapped_column(
        ForeignKey("categories.slug", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    tagline: Mapped[str | None] = mapped_column(String(500), nullable=True)
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)

    pricing: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pricing_type: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)
    price_range: Mapped[str | None] = mapped_column(String(100), nullable=True)
    free_trial: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    key_features: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)
    pros: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)
    cons: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)
    use_cases: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)
    platforms: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)

    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    still_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    seo_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seo_meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Maintained by tasks.calculate_trending
    trending_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    is_trending: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    category_ref: Mapped["Category | None"] = relationship(back_populates="tools")
    tags: Mapped[list["Tag"]] = relationship(
        secondary=tool_tags,
        back_populates="tools",
    )
    jobs: Mapped[list["Job"]] = relationship(
        secondary=tool_jobs,
        back_populates="tools",
    )
    tasks: Mapped[list["Task"]] = relationship(
        secondary=tool_tasks,
        back_populates="tools",
    )
    views: Mapped[list["ToolView"]] = relationship(
        back_populates="tool",
        cascade="all, delete-orphan",
    )
