"""
Settings for the Book Library API.

Values come from environment variables (case-insensitive) or a local .env
file, e.g. DATABASE_URL=postgresql://library:secret@db/library.

    from booklibrary.config import get_settings

    settings = get_settings()
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library API settings."""

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    app_name: str = Field(default="Book Library API")
    debug: bool = Field(default=False, description="Echo SQL and show error details")
    api_version: str = Field(default="v1", description="Mounted as /api/{api_version}")
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = Field(
        default="development",
        description="development, staging or production"
    )

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///./library.db",
        description="SQLAlchemy URL; PostgreSQL in production"
    )
    db_pool_size: int = 5
    db_max_overflow: int = 10
    create_tables_on_startup: bool = Field(
        default=True,
        description="Create missing reader/book tables at startup instead of running Alembic"
    )

    # -------------------------------------------------------------------------
    # HTTP / Logging
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated CORS origins"
    )
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_sqlite(self) -> bool:
        """SQLite URLs don't accept connection pool sizing options."""
        return self.database_url.startswith("sqlite")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
