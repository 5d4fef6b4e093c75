"""Shared utility functions for service layer."""
import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """
    Convert a display name into a URL slug.

    Lowercases, collapses every run of non-alphanumeric characters into a
    single hyphen and strips hyphens from both ends, so "AI Chat & Assistant"
    becomes "ai-chat-assistant".
    """
    return _NON_ALNUM.sub("-", value.lower()).strip("-")


def same_category(left: str | None, right: str | None) -> bool:
    """Compare two category labels in slug form. Missing labels never match."""
    if not left or not right:
        return False
    return slugify(left) == slugify(right)
