"""Application settings and configuration.

This module defines all configuration options for the Comrade application.
Settings are loaded from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    This class defines all configuration options for the local data layer and
    the CRUD backend. Settings can be overridden via environment variables or
    .env files.
    """

    # Application metadata
    app_name: str = Field(default="Comrade", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration for the CRUD backend
    database_url: str = Field(default="sqlite:///./comrade.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Local key-value storage medium
    storage_backend: Literal["memory", "sql", "redis"] = Field(
        default="memory",
        alias="STORAGE_BACKEND",
    )
    storage_database_url: str | None = Field(default=None, alias="STORAGE_DATABASE_URL")
    redis_url: str = Field(default="redis://localhost:6379", alias="REDIS_URL")

    # Session defaults
    default_city: str = Field(default="sf", alias="DEFAULT_CITY")
    biometric_prompt: str = Field(
        default="Authenticate to access Comrade",
        alias="BIOMETRIC_PROMPT",
    )

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides.

        Returns:
            The active database URL (test database if in testing mode, otherwise production)
        """
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def effective_storage_url(self) -> str:
        """Return the URL backing the SQL key-value store.

        Falls back to the backend database when no dedicated storage URL is set.
        """
        return self.storage_database_url or self.effective_database_url


settings = Settings()
