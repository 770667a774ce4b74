"""
Configuration management for the auth dashboard.

Settings are read from environment variables prefixed with ``AUTH_DASHBOARD_``
and from an optional ``.env`` file.
"""
from typing import Optional
from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import SyncDefaults


class DashboardSettings(BaseSettings):
    """Auth dashboard settings."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="auth-dashboard")
    environment: str = Field(default="development")

    # Switchboard connection
    switchboard_url: Optional[str] = Field(default=None)
    request_timeout_seconds: float = Field(default=SyncDefaults.REQUEST_TIMEOUT_SECONDS, gt=0)
    verify_ssl: bool = Field(default=True)

    # Sync behaviour
    poll_interval_seconds: float = Field(default=SyncDefaults.POLL_INTERVAL_SECONDS, gt=0)
    operation_log_page_size: int = Field(default=SyncDefaults.OPERATION_LOG_PAGE_SIZE, gt=0)

    # Bearer tokens
    token_expires_in_seconds: int = Field(default=SyncDefaults.TOKEN_EXPIRES_IN_SECONDS, gt=0)
    token_algorithm: str = Field(default=SyncDefaults.TOKEN_ALGORITHM)

    @field_validator("switchboard_url")
    @classmethod
    def _strip_switchboard_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def has_switchboard(self) -> bool:
        """Check if a switchboard endpoint is configured."""
        return self.switchboard_url is not None


@lru_cache()
def get_settings() -> DashboardSettings:
    """Get cached dashboard settings."""
    return DashboardSettings()
