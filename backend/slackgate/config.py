"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - One credential/workspace pair per process: no per-request overrides

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - SLACK_BOT_TOKEN accepted as fallback for SLACK_TOKEN: bot-token deployments keep working
    - Credentials default to None instead of failing validation: the entry point reports
      every missing variable at once, then exits
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True,
    )

    # Slack
    slack_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("slack_token", "slack_bot_token"),
    )
    slack_team_id: str | None = None
    slack_api_base_url: str = "https://slack.com/api/"
    slack_timeout_seconds: float = 20.0

    # API
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def missing_credentials(self) -> list[str]:
        missing = []
        if not self.slack_token:
            missing.append("SLACK_TOKEN (or SLACK_BOT_TOKEN)")
        if not self.slack_team_id:
            missing.append("SLACK_TEAM_ID")
        return missing


@lru_cache
def get_settings() -> Settings:
    return Settings()
