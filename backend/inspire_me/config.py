"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults provided for every setting: works out-of-the-box with no .env

Design Decisions:
    - pydantic-settings reads env vars and .env with type coercion
    - selection_delay_ms defaults to 0; the old 1s "thinking" pause is opt-in
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # App
    app_name: str = "Inspire Me"
    app_version: str = "1.0.0"

    # Selection
    selection_delay_ms: int = Field(0, ge=0, le=10_000)
    random_seed: int | None = None

    # API
    cors_origins: list[str] = ["http://localhost:8000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
