"""Configuration management for tablegen.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Settings are loaded once and cached.
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# URL schemes SQLAlchemy maps onto one of the supported dialects
SUPPORTED_URL_PREFIXES = ("sqlite", "postgresql", "mysql", "mariadb")


class Settings(BaseSettings):
    """Runtime configuration settings.

    Settings are loaded from environment variables prefixed with
    ``TABLEGEN_`` and from a local ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TABLEGEN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "tablegen"
    environment: Literal["development", "production", "testing"] = "development"

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./tablegen.db"
    db_echo: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Ensure the URL targets MySQL, PostgreSQL or SQLite."""
        scheme = v.split(":", 1)[0].split("+", 1)[0].lower()
        if scheme not in SUPPORTED_URL_PREFIXES:
            raise ValueError(
                f"Unsupported database URL scheme '{scheme}'. "
                f"Expected one of: {', '.join(SUPPORTED_URL_PREFIXES)}"
            )
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
