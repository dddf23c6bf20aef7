"""Client Configuration — base URL and timeout for reaching the todo API.

Design Decisions:
    - TODO_ prefix keeps client settings apart from the server's DB_* settings
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    api_url: str = "http://localhost:8080"
    api_timeout_seconds: float = 10.0


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()
