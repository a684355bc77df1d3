"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic import PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the user and repository fetch."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_api_url: str = "https://api.github.com"

    # Search predicate and paging are fixed for a run
    search_location: str = "Shanghai"
    min_followers: int = 200
    search_per_page: PositiveInt = 100
    # GitHub caps per_page at 100, so larger values still return at most 100 repos
    repos_per_page: PositiveInt = 500

    request_timeout: PositiveFloat = 10.0
    # None = one worker per user
    max_workers: PositiveInt | None = None

    output_dir: Path = Path(".")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
