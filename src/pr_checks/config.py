# src/pr_checks/config.py
from functools import lru_cache
from typing import Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # GitHub
    github_token: str | None = None
    github_api_url: str = "https://api.github.com"
    github_webhook_secret: str | None = None

    # Workflow context (set by GitHub Actions)
    github_repository: str | None = None
    github_event_path: str | None = None
    pr_number: int | None = None

    # Tracked comment
    comment_marker: str = "<!-- pr-checks-bot -->"
    comment_heading: str = "PR Validation"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
