"""SQLAlchemy models."""
from models.base import Base, TimestampMixin
from models.category import Category
from models.job import Job, tool_jobs
from models.tag import Tag, tool_tags
from models.task import Task, tool_tasks
from models.tool import Tool  # Must be after job/tag/task due to junction tables
from models.tool_view import ToolView
from models.user import User, UserRole

__all__ = [
    "Base",
    "Category",
    "Job",
    "Tag",
    "Task",
    "TimestampMixin",
    "Tool",
    "ToolView",
    "User",
    "UserRole",
    "tool_jobs",
    "tool_tags",
    "tool_tasks",
]
