"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from MGIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MGIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    log_level: str = "INFO"
    json_logs: bool = False

    # Config file with sources and locations
    config_path: str = "$HOME/.mgit/config.json"

    # External git executable
    git_binary: str = "git"

    # --- Remote sources ---
    github_api_url: str = "https://api.github.com"
    request_timeout: float = 30.0

    # Bounded queue between remote sources and the deduplicator
    queue_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
