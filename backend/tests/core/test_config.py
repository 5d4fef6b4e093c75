"""Tests for application configuration."""
import pytest
from pydantic import ValidationError

from core.config import AWESOME_AI_URL, Settings
from core.matching import CategoryMatchMode


class TestDefaults:
    """Settings defaults when only the database URL is provided."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unset variables fall back to documented defaults."""
        for var in (
            "ECHO_SQL",
            "CREATE_SCHEMA",
            "LOG_LEVEL",
            "ADMIN_EMAIL",
            "ADMIN_PASSWORD",
            "ADMIN_NAME",
            "CATEGORY_MATCH_MODE",
            "AWESOME_AI_URL",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None, database_url="sqlite+aiosqlite://")

        assert settings.echo_sql is False
        assert settings.create_schema is False
        assert settings.log_level == "INFO"
        assert settings.admin_email == "admin@findmyai.com"
        assert settings.admin_password == "admin"
        assert settings.admin_name == "Admin User"
        assert settings.category_match_mode is CategoryMatchMode.EXACT
        assert settings.awesome_ai_url == AWESOME_AI_URL

    def test_database_url_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing DATABASE_URL fails validation."""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestEnvironmentVariables:
    """Settings read from the environment."""

    def test_reads_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each setting is read from its environment variable."""
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/findmyai")
        monkeypatch.setenv("ECHO_SQL", "true")
        monkeypatch.setenv("ADMIN_EMAIL", "ops@example.com")
        monkeypatch.setenv("ADMIN_PASSWORD", "hunter2")
        monkeypatch.setenv("CATEGORY_MATCH_MODE", "keyword")
        monkeypatch.setenv("AWESOME_AI_URL", "https://example.com/readme.md")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql+asyncpg://u:p@db/findmyai"
        assert settings.echo_sql is True
        assert settings.admin_email == "ops@example.com"
        assert settings.admin_password == "hunter2"
        assert settings.category_match_mode is CategoryMatchMode.KEYWORD
        assert settings.awesome_ai_url == "https://example.com/readme.md"


class TestCategoryMatchMode:
    """CATEGORY_MATCH_MODE parsing."""

    @pytest.mark.parametrize("value", ["exact", "EXACT", " Exact "])
    def test_exact_any_case(self, value: str) -> None:
        """Match mode is case-insensitive."""
        settings = Settings(_env_file=None, database_url="x", CATEGORY_MATCH_MODE=value)
        assert settings.category_match_mode is CategoryMatchMode.EXACT

    def test_keyword(self) -> None:
        """Keyword mode is accepted."""
        settings = Settings(_env_file=None, database_url="x", CATEGORY_MATCH_MODE="Keyword")
        assert settings.category_match_mode is CategoryMatchMode.KEYWORD

    def test_unknown_mode_rejected(self) -> None:
        """An unknown mode fails validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url="x", CATEGORY_MATCH_MODE="fuzzy")


class TestLogLevel:
    """LOG_LEVEL validation."""

    def test_lowercase_normalized(self) -> None:
        """Level names are upper-cased."""
        settings = Settings(_env_file=None, database_url="x", LOG_LEVEL="debug")
        assert settings.log_level == "DEBUG"

    def test_unknown_level_rejected(self) -> None:
        """An unknown level fails validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url="x", LOG_LEVEL="chatty")
