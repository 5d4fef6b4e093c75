"""Tag model for labelling tools."""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Table, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.tool import Tool


# Junction table for many-to-many relationship between tools and tags
tool_tags = Table(
    "tool_tags",
    Base.metadata,
    Column(
        "tool_id",
        ForeignKey("tools.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    # Index for lookups by tag (composite PK already indexes tool_id first)
    Index("ix_tool_tags_tag_id", "tag_id"),
)


class Tag(Base):
    """Tag model - globally unique tag names shared across the catalog."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    category: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        index=True,
        comment="Category slug used to auto-assign this tag to tools",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    tools: Mapped[list["Tool"]] = relationship(
        secondary=tool_tags,
        back_populates="tags",
    )
