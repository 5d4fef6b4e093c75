"""Pydantic schemas for static catalog records fed to the seed services."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from schemas.validators import (
    normalize_category,
    validate_and_normalize_tag,
    validate_and_normalize_tags,
    validate_name,
    validate_slug,
)
from services.utils import slugify


class CatalogRecord(BaseModel):
    """Base for records keyed by a unique display name."""

    model_config = ConfigDict(frozen=False, extra="forbid")

    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        """Trim and validate the name."""
        return validate_name(v)

    def to_columns(self) -> dict[str, Any]:
        """Column values other than the natural key, for create/update payloads."""
        return self.model_dump(exclude={"name"})


class SluggedRecord(CatalogRecord):
    """Record with a unique slug, derived from the name when not given."""

    slug: str | None = None

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v: str | None) -> str | None:
        """Validate an explicit slug."""
        if v is None:
            return None
        return validate_slug(v)

    @model_validator(mode="after")
    def derive_slug(self) -> "SluggedRecord":
        """Fill the slug from the name."""
        if self.slug is None:
            self.slug = slugify(self.name)
        return self


class CategoryRecord(SluggedRecord):
    """A tool category, e.g. "Image Generators"."""

    featured: bool = False
    seo_title: str | None = None
    seo_description: str | None = None


class ToolRecord(SluggedRecord):
    """A fully expanded tool entry."""

    category: str
    tagline: str | None = None
    short_description: str | None = None
    description: str | None = None
    website: str | None = None
    pricing: str | None = None
    pricing_type: list[str] = Field(default_factory=list)
    price_range: str | None = None
    free_trial: bool = False
    key_features: list[str] = Field(default_factory=list)
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    use_cases: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    verified: bool = True
    still_active: bool = True
    featured: bool = False
    seo_title: str | None = None
    seo_meta_description: str | None = None

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str) -> str:
        """Store the category in slug form."""
        slug = normalize_category(v)
        if slug is None:
            raise ValueError("Tool category cannot be empty")
        return slug


class TaxonomyRecord(SluggedRecord):
    """Shared shape of job and task records."""

    category: str | None = None
    description: str | None = None
    icon: str | None = None
    featured: bool = False

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str | None) -> str | None:
        """Store the category in slug form."""
        return normalize_category(v)


class JobRecord(TaxonomyRecord):
    """A profession, e.g. "Graphic Designer"."""


class TaskRecord(TaxonomyRecord):
    """A piece of work, e.g. "Image Generation"."""


class TagRecord(CatalogRecord):
    """A tag, optionally tied to the category whose tools it labels."""

    category: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        """Tags use the lowercase hyphenated format."""
        return validate_and_normalize_tag(v)

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str | None) -> str | None:
        """Store the category in slug form."""
        return normalize_category(v)


class TagAssignment(BaseModel):
    """Explicit tags for one tool, looked up by tool name."""

    tool_name: str
    tag_names: list[str]

    @field_validator("tag_names", mode="before")
    @classmethod
    def normalize_tags(cls, v: list[str] | None) -> list[str]:
        """Normalize and validate tags."""
        if v is None:
            return []
        return validate_and_normalize_tags(v)
