# 📄 File: user_service/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of the User Service in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for server, PostgreSQL, logging and hashing parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - user_service.main (application startup)
# - Database connection modules
# - Credential engine (bcrypt cost)
# - Logging setup

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="User Service", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8080, description="Server port")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: Optional[str] = Field(None, description="PostgreSQL connection URL")
    PG_HOST: str = Field(default="localhost", description="Database host")
    PG_PORT: int = Field(default=5432, description="Database port")
    PG_DB: str = Field(default="users", description="Database name")
    PG_USER: str = Field(default="postgres", description="Database user")
    PG_PASSWORD: str = Field(default="", description="Database password")

    # Connection Pool Settings
    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    BCRYPT_ROUNDS: int = Field(default=10, description="BCrypt hash rounds")

    # =========================================================================
    # PAGINATION
    # =========================================================================

    DEFAULT_PAGE_LIMIT: int = Field(default=100, description="Default list limit")
    DEFAULT_PAGE_OFFSET: int = Field(default=0, description="Default list offset")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt accepts a cost between 4 and 31."""
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Get the database URL, preferring explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        return (
            f"postgresql+asyncpg://{self.PG_USER}:{self.PG_PASSWORD}"
            f"@{self.PG_HOST}:{self.PG_PORT}/{self.PG_DB}"
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"

    @property
    def debug(self) -> bool:
        """Alias for DEBUG to allow access as settings.debug"""
        return self.DEBUG

    @property
    def database_pool_size(self) -> int:
        return self.DB_POOL_SIZE

    @property
    def database_max_overflow(self) -> int:
        return self.DB_MAX_OVERFLOW

    @property
    def database_pool_timeout(self) -> int:
        return self.DB_POOL_TIMEOUT

    @property
    def database_pool_recycle(self) -> int:
        return self.DB_POOL_RECYCLE


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
