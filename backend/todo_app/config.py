"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - database_url, when set, wins over the DB_* parts

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DB_HOST starting with /cloudsql is a Unix socket directory (Cloud SQL connector);
      asyncpg takes it through the `host` query parameter
    - Schema auto-sync defaults to on outside production, mirroring a dev-friendly setup
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_env: str = "development"

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_pass: str = ""
    db_name: str = "todos"
    db_sync: bool | None = None
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 10
    database_max_overflow: int = 5

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def schema_sync(self) -> bool:
        """Create missing tables on startup."""
        if self.db_sync is not None:
            return self.db_sync
        return not self.is_production

    @property
    def sqlalchemy_url(self) -> str:
        """Async SQLAlchemy URL assembled from the DB_* settings."""
        if self.database_url:
            return self.database_url
        if self.db_host.startswith("/cloudsql"):
            url = URL.create(
                "postgresql+asyncpg",
                username=self.db_user,
                password=self.db_pass or None,
                database=self.db_name,
                query={"host": self.db_host},
            )
        else:
            url = URL.create(
                "postgresql+asyncpg",
                username=self.db_user,
                password=self.db_pass or None,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
