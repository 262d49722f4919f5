"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Liftlog API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API (routes are served at the root by default)
    api_prefix: str = ""

    # Single owner until auth exists
    owner_id: str = "default"

    # Database: SQLite for local use, postgresql+asyncpg://... in production
    database_url: str = "sqlite+aiosqlite:///./liftlog.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    auto_create_tables: bool = True

    # CORS: comma-separated list of allowed origins, "*" for any
    cors_origins: str = "*"

    # History queries
    history_default_limit: int = 50
    history_max_limit: int = 200

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def sync_database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return self.database_url.replace("+aiosqlite", "").replace("+asyncpg", "")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()] or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
