"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Store address comes from REDIS_URL (never hardcoded in callers)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults for everything: works out-of-the-box against a local Redis
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    redis_url: str = "redis://localhost:6379"

    @field_validator("redis_url", mode="before")
    @classmethod
    def add_redis_scheme(cls, v: str) -> str:
        """Accept bare host:port (as docker-compose passes it) by adding redis://."""
        if isinstance(v, str) and v and "://" not in v:
            return f"redis://{v}"
        return v

    redis_password: str | None = None
    redis_db: int = 0
    record_key_prefix: str = "record:"
    store_startup_timeout_seconds: float = 5.0

    # Server
    host: str = "0.0.0.0"
    port: int = 45000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
