"""
Shared validation functions for catalog record schemas.

Used by the category, tool, job, task and tag records in schemas.catalog.
"""
import re

from services.utils import slugify

# Tag format: lowercase alphanumeric with hyphens (e.g., 'chatbot', 'text-to-speech')
TAG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

# Slug format shared by categories, tools, jobs and tasks
SLUG_PATTERN = TAG_PATTERN


def validate_name(name: str) -> str:
    """
    Trim and validate a display name.

    Raises:
        ValueError: If the name is empty or has no characters usable in a slug.
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValueError("Name cannot be empty")
    if not slugify(trimmed):
        raise ValueError(f"Name '{trimmed}' has no letters or digits")
    return trimmed


def validate_slug(slug: str) -> str:
    """Validate an explicit slug."""
    if not SLUG_PATTERN.match(slug):
        raise ValueError(
            f"Invalid slug: '{slug}'. Use lowercase letters, numbers, and hyphens only.",
        )
    return slug


def normalize_category(category: str | None) -> str | None:
    """Convert a category label or display name into its slug form."""
    if category is None:
        return None
    slug = slugify(category)
    return slug or None


def validate_and_normalize_tag(tag: str) -> str:
    """
    Normalize and validate a single tag.

    Args:
        tag: The tag string to validate.

    Returns:
        The normalized tag (lowercase, trimmed).

    Raises:
        ValueError: If tag is empty or has invalid format.
    """
    normalized = tag.lower().strip()
    if not normalized:
        raise ValueError("Tag name cannot be empty")
    if not TAG_PATTERN.match(normalized):
        raise ValueError(
            f"Invalid tag format: '{normalized}'. "
            "Use lowercase letters, numbers, and hyphens only (e.g., 'text-to-speech').",
        )
    return normalized


def validate_and_normalize_tags(tags: list[str]) -> list[str]:
    """
    Normalize and validate a list of tags.

    Returns:
        List of normalized tags with empty strings filtered out and duplicates
        removed (preserving first occurrence order).

    Raises:
        ValueError: If any tag has invalid format.
    """
    normalized = []
    seen: set[str] = set()
    for tag in tags:
        trimmed = tag.lower().strip()
        if not trimmed:
            continue
        validated = validate_and_normalize_tag(trimmed)
        if validated not in seen:
            seen.add(validated)
            normalized.append(validated)
    return normalized
