"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Optional[str] = Field(default=None, description="Overrides the debug-derived log level")

    # API Configuration
    api_title: str = Field(default="Tasks API")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api")
    docs_url: str = Field(default="/api-docs")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./tasks.db",
        description="SQLAlchemy async database URL"
    )
    database_echo: bool = Field(default=False, description="Log every SQL statement")

    # CORS
    cors_origins: str | List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return list(DEFAULT_CORS_ORIGINS)
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"

    @property
    def effective_log_level(self) -> str:
        """Log level name used to configure the root logger."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug else "INFO"

    def validate_environment(self) -> None:
        """Reject settings that cannot back a long-running deployment."""
        if not self.database_url:
            raise ValueError("Missing required environment variable: DATABASE_URL")

        if ":memory:" in self.database_url:
            raise ValueError("DATABASE_URL points to an in-memory database; data would be lost on restart")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
