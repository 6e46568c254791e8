"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="WARRANT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Permission store
    permissions_file: Path | None = Field(
        default=None,
        description="JSON document with permissions, roles, users and resources",
    )

    # Ability engine
    template_fields: list[str] = Field(
        default_factory=lambda: ["id", "email"],
        description="Acting-user attributes that condition templates may reference",
    )
    owner_field: str = Field(
        default="authorId",
        description="Resource attribute holding the owning user id",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] | None = Field(
        default=None,
        description="Log renderer; console in development, json elsewhere when unset",
    )
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
