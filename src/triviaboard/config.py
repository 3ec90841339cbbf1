"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Trivia API
    jservice_url: str = Field(
        default="https://jservice.io/api",
        description="Base URL of the jService-compatible trivia API",
    )
    request_timeout: float = Field(default=10.0, gt=0, description="Trivia API timeout in seconds")

    # Board shape
    category_count: int = Field(default=6, ge=1, description="Categories (columns) per board")
    clues_per_category: int = Field(default=5, ge=1, description="Clues (rows) per category")
    catalog_size: int = Field(
        default=100,
        ge=2,
        description="Candidate categories requested from the catalog before sampling",
    )
    parallel_fetch: bool = Field(
        default=False, description="Fetch category clue sets concurrently instead of in sequence"
    )

    # App
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool | None = Field(default=None, description="Debug mode (defaults based on environment)")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Sentry
    sentry_dsn: str = Field(default="", description="Sentry DSN for error tracking")

    @model_validator(mode="after")
    def _check_catalog_size(self) -> "Settings":
        # The catalog must offer more candidates than the board needs
        if self.catalog_size <= self.category_count:
            raise ValueError(
                f"catalog_size ({self.catalog_size}) must exceed category_count ({self.category_count})"
            )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.environment == "test"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def debug_enabled(self) -> bool:
        """Get debug mode, defaulting based on environment if not explicitly set."""
        if self.debug is not None:
            return self.debug
        return self.is_development


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
