"""Shared exceptions for service layer operations."""


class UnknownCategoryError(Exception):
    """Raised when a catalog record references a category that was not seeded."""

    def __init__(self, category: str, record_name: str) -> None:
        self.category = category
        self.record_name = record_name
        super().__init__(f"Unknown category '{category}' for '{record_name}'")


class CatalogIntegrityError(Exception):
    """
    Raised when the static catalog contradicts itself.

    For example two tools that slugify to the same slug, which would otherwise
    surface as a unique-constraint failure half way through a seed run.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
