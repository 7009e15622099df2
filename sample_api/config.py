"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every default reproduces the fixed demo behavior (runs with no env at all)
    - timeout_guard_seconds < slow_response_delay_seconds (the guard must win)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - SAMPLE_API_ prefix: avoids picking up generic HOST/PORT from the shell
    - Handlers read settings through Depends(get_settings) so tests can override
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SAMPLE_API_", env_file=".env", case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # API
    cors_origins: list[str] = ["*"]

    # Sample endpoints
    timeout_guard_seconds: float = 5.0
    slow_response_delay_seconds: float = 6.0
    redirect_url: str = "https://www.google.com"
    auth_token: str = "my-secret-token"
    large_response_size: int = 100_000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def guard_shorter_than_delay(self) -> "Settings":
        if self.timeout_guard_seconds >= self.slow_response_delay_seconds:
            raise ValueError(
                "timeout_guard_seconds must be shorter than "
                "slow_response_delay_seconds",
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
