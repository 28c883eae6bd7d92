"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (database credentials) come from environment variables, never hardcoded
    - get_settings() is cached (lru_cache): single instance per process
    - max_record_bytes bounds every encoded document written by any store

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from docregistry.core.document_codec import DEFAULT_MAX_RECORD_BYTES


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://registry:registry@db:5432/registry"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs use postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # create tables on startup instead of relying on `alembic upgrade head`
    database_create_tables: bool = False

    # Storage
    store_backend: Literal["sql", "memory"] = "sql"
    max_record_bytes: int = Field(DEFAULT_MAX_RECORD_BYTES, gt=0)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
