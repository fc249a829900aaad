"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
Settings are built once per process and shared read-only across requests.

The Notion database identifiers and the campaign title filter are fixed
configuration, not computed per request.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Notion (External Record Source)
    # -------------------------------------------------------------------------
    notion_token: SecretStr = Field(
        default=SecretStr(""),
        description="Notion integration token (bearer credential)",
    )
    notion_api_url: str = Field(
        default="https://api.notion.com",
        description="Notion REST API base URL",
    )
    notion_version: str = Field(
        default="2022-06-28",
        description="Value sent in the Notion-Version header",
    )
    campaigns_database_id: str = Field(
        default="2b708b1c-348f-8141-999f-f77b91095543",
        description="Notion database holding campaign pages",
    )
    mentions_database_id: str = Field(
        default="2bd08b1c348f8023bf04fa37fc57d0b6",
        description="Notion database holding Instagram mention pages",
    )
    campaign_title: str = Field(
        default="스웻이프",
        description="Campaign name matched by the campaign title filter",
    )
    mentions_page_size: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Records requested per mentions query (first page only)",
    )
    seeding_placeholder_thumbnail: str = Field(
        default="https://via.placeholder.com/100",
        description="Thumbnail used for seeding entries without an image",
    )

    # -------------------------------------------------------------------------
    # Dashboard Client
    # -------------------------------------------------------------------------
    api_url: str = Field(
        default="",
        description="Base URL of the dashboard API. Empty when served from the same origin.",
    )
    static_content_path: str | None = Field(
        default=None,
        description="Optional JSON file overriding the built-in static dashboard content",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    api_host: str = Field(default="0.0.0.0", description="Bind host for the API server")
    api_port: int = Field(default=3001, description="Bind port for the API server")

    @field_validator("notion_token", mode="before")
    @classmethod
    def strip_notion_token(cls, value: object) -> object:
        """Trim surrounding whitespace from the token, as pasted secrets often carry a newline."""
        if isinstance(value, SecretStr):
            return SecretStr(value.get_secret_value().strip())
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("api_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, value: object) -> object:
        if isinstance(value, str):
            return value.rstrip("/")
        return value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
