"""Task model - things users want done, used as an SEO browsing taxonomy."""
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, ForeignKey, Index, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from models.tool import Tool


# Junction table for many-to-many relationship between tools and tasks
tool_tasks = Table(
    "tool_tasks",
    Base.metadata,
    Column(
        "tool_id",
        ForeignKey("tools.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "task_id",
        ForeignKey("tasks.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Index("ix_tool_tasks_task_id", "task_id"),
)


class Task(Base, TimestampMixin):
    """Task model - e.g. "Image Generation"."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    tools: Mapped[list["Tool"]] = relationship(
        secondary=tool_tasks,
        back_populates="tasks",
    )
