"""ToolView model - one recorded visit to a tool's detail page."""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.tool import Tool


class ToolView(Base):
    """ToolView model - input to the trending score calculation."""

    __tablename__ = "tool_views"
    __table_args__ = (
        # Trending counts views per tool within a time window
        Index("ix_tool_views_tool_id_created_at", "tool_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    tool_id: Mapped[int] = mapped_column(
        ForeignKey("tools.id", ondelete="CASCADE"),
        nullable=False,
    )
    ip_hash: Mapped[str | None] = mapped_column(String(128), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    tool: Mapped["Tool"] = relationship(back_populates="views")
