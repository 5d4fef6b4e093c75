"""Static catalog data: categories, tools, jobs, tasks and tags."""
from catalog.categories import CATEGORIES
from catalog.category_map import CATEGORY_TO_JOBS, CATEGORY_TO_TAGS, CATEGORY_TO_TASKS
from catalog.jobs_tasks import JOBS, TASKS
from catalog.tags import TAG_ASSIGNMENTS, TAGS
from catalog.tools import TOOL_DEFINITIONS, build_tool_records

__all__ = [
    "CATEGORIES",
    "CATEGORY_TO_JOBS",
    "CATEGORY_TO_TAGS",
    "CATEGORY_TO_TASKS",
    "JOBS",
    "TAGS",
    "TAG_ASSIGNMENTS",
    "TASKS",
    "TOOL_DEFINITIONS",
    "build_tool_records",
]
