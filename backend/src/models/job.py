"""Job model - professions used as an SEO browsing taxonomy."""
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, ForeignKey, Index, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from models.tool import Tool


# Junction table for many-to-many relationship between tools and jobs
tool_jobs = Table(
    "tool_jobs",
    Base.metadata,
    Column(
        "tool_id",
        ForeignKey("tools.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "job_id",
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Index("ix_tool_jobs_job_id", "job_id"),
)


class Job(Base, TimestampMixin):
    """Job model - e.g. "Graphic Designer", listing the tools that suit the role."""

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    tools: Mapped[list["Tool"]] = relationship(
        secondary=tool_jobs,
        back_populates="jobs",
    )
