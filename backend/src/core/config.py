"""Application configuration using pydantic-settings."""
import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.matching import CategoryMatchMode

AWESOME_AI_URL = "https://github.com/openbestof/awesome-ai/raw/refs/heads/main/readme.md"


class Settings(BaseSettings):
    """Seed script settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str
    echo_sql: bool = Field(default=False, validation_alias="ECHO_SQL")
    # Create missing tables before seeding (local sqlite/dev databases only;
    # deployed databases get their schema from migrations)
    create_schema: bool = Field(default=False, validation_alias="CREATE_SCHEMA")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Admin account written by tasks.seed_admin
    admin_email: str = Field(default="admin@findmyai.com", validation_alias="ADMIN_EMAIL")
    admin_password: str = Field(default="admin", validation_alias="ADMIN_PASSWORD")
    admin_name: str = Field(default="Admin User", validation_alias="ADMIN_NAME")

    category_match_mode: CategoryMatchMode = Field(
        default=CategoryMatchMode.EXACT,
        validation_alias="CATEGORY_MATCH_MODE",
    )

    awesome_ai_url: str = Field(default=AWESOME_AI_URL, validation_alias="AWESOME_AI_URL")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name and reject unknown levels."""
        if not isinstance(v, str):
            raise ValueError("LOG_LEVEL must be a string")
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @field_validator("category_match_mode", mode="before")
    @classmethod
    def normalize_match_mode(cls, v: object) -> object:
        """Accept the match mode in any letter case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
