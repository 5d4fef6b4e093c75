"""Category matching rules for wiring tools to the job/task/tag taxonomy."""
from enum import StrEnum


class CategoryMatchMode(StrEnum):
    """How a tool's category is matched against job, task and tag categories."""

    # Connect only targets whose own category label equals the tool's category
    EXACT = "exact"
    # Exact matches plus the curated category keyword maps in catalog.category_map
    KEYWORD = "keyword"
