"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from money.filters.ordering import OrderingDirection, OrderingPreference
from money.filters.visibility import TagPolicy, VisibilityFilter


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # Observability
    log_level: str = "INFO"

    # Initial filter of a new session
    default_visibility: VisibilityFilter = VisibilityFilter.visible_only
    default_ordering: OrderingPreference = OrderingPreference.by_id
    default_direction: OrderingDirection = OrderingDirection.ascending
    tag_policy: TagPolicy = TagPolicy.each_selected

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
