"""Consistency checks for the static catalog."""
from catalog import (
    CATEGORIES,
    CATEGORY_TO_JOBS,
    CATEGORY_TO_TAGS,
    CATEGORY_TO_TASKS,
    JOBS,
    TAG_ASSIGNMENTS,
    TAGS,
    TASKS,
    TOOL_DEFINITIONS,
    build_tool_records,
)
from catalog.tools import ToolDefinition, build_tool_record, get_platforms, name_hash
from services.seed_service import validate_catalog


def test_catalog_is_consistent() -> None:
    """No duplicate names/slugs and every category reference resolves."""
    validate_catalog(CATEGORIES, build_tool_records(), JOBS, TASKS, TAGS)


def test_every_definition_builds() -> None:
    """One record per definition."""
    assert len(build_tool_records()) == len(TOOL_DEFINITIONS)


def test_keyword_map_keys_are_category_slugs() -> None:
    """Keyword maps are keyed by known category slugs."""
    slugs = {category.slug for category in CATEGORIES}
    for mapping in (CATEGORY_TO_JOBS, CATEGORY_TO_TASKS, CATEGORY_TO_TAGS):
        assert set(mapping) <= slugs


def test_keyword_tag_names_exist() -> None:
    """Curated tag lists only name seeded tags."""
    names = {tag.name for tag in TAGS}
    for tag_names in CATEGORY_TO_TAGS.values():
        assert set(tag_names) <= names


def test_tag_assignments_reference_catalog() -> None:
    """Explicit pairs name catalog tools and tags."""
    tool_names = {definition.name for definition in TOOL_DEFINITIONS}
    tag_names = {tag.name for tag in TAGS}
    for assignment in TAG_ASSIGNMENTS:
        assert assignment.tool_name in tool_names
        assert set(assignment.tag_names) <= tag_names


def test_tag_assignments_agree_with_categories() -> None:
    """Explicit pairs only name tags of the tool's own category."""
    tool_categories = {record.name: record.category for record in build_tool_records()}
    tag_categories = {tag.name: tag.category for tag in TAGS}
    for assignment in TAG_ASSIGNMENTS:
        for name in assignment.tag_names:
            assert tag_categories[name] == tool_categories[assignment.tool_name]


def test_build_is_deterministic() -> None:
    """Generated fields depend only on the definition."""
    definition = ToolDefinition("Example AI", "SEO", "Does SEO things.")
    assert build_tool_record(definition) == build_tool_record(definition)
    assert name_hash("Example AI") == name_hash("Example AI")


def test_generated_defaults() -> None:
    """Brief definitions expand into complete records."""
    record = build_tool_record(ToolDefinition("Example AI", "SEO", "Does SEO things."))

    assert record.slug == "example-ai"
    assert record.category == "seo"
    assert record.website == "https://example-ai.com"
    assert record.short_description == "Does SEO things."
    assert record.key_features
    assert record.pros
    assert record.cons
    assert record.use_cases
    assert 2 <= len(record.platforms) <= 4
    assert record.platforms == get_platforms("Example AI")
    assert record.seo_title == "Example AI - SEO | FindMyAI"


def test_detailed_overrides_applied() -> None:
    """Hand-written entries override generated fields."""
    chatgpt = next(record for record in build_tool_records() if record.name == "ChatGPT")
    assert chatgpt.featured is True
    assert chatgpt.category == "ai-chat-assistant"
