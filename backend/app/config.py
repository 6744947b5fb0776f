"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the service starts with an empty environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - BASE_URL falls back to the public deployment so discovery documents are always absolute
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    port: int = 3000
    base_url: str = "https://golf-intel-production.up.railway.app"

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Discovery URLs are built as f"{base_url}/path"."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Agent identity
    agent_name: str = "golf-intel"
    agent_version: str = "1.0.0"
    agent_description: str = (
        "Real-time golf data from PGA Tour and LPGA - leaderboards, scores, "
        "schedules, and player stats."
    )

    # Upstream (ESPN)
    espn_base_url: str = "https://site.api.espn.com/apis/site/v2/sports/golf"
    user_agent: str = "golf-intel-agent/1.0"

    # Static assets
    icon_path: str = "./icon.png"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
