"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Every setting has a default so the gateway starts with no environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000

    @field_validator("port")
    @classmethod
    def check_port_range(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    # Store
    mongodb_url: str = "mongodb://localhost:27017"
    database_name: str = "Webstore"
    mongodb_timeout_ms: int = 5000

    # API
    cors_origins: list[str] = ["*"]
    static_dir: str = "static"

    # Observability
    log_file: str = "project.log"
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
