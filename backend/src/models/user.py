"""User model for storing site accounts."""
from enum import StrEnum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin


class UserRole(StrEnum):
    """Account roles."""

    ADMIN = "ADMIN"
    USER = "USER"


class User(Base, TimestampMixin):
    """User model - email/password accounts; ADMIN users manage the catalog."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(
        String(20),
        default=UserRole.USER.value,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
