"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
Business constants for the production calendar live here so they can be
changed per deployment without touching the services.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )

    # ===================
    # PRODUCTION CALENDAR
    # ===================
    entry_cutoff_day: int = Field(
        default=5,
        ge=1,
        le=28,
        description="Day of month on which the current month closes for new entries"
    )
    active_months_back_before_cutoff: int = Field(
        default=2,
        ge=0,
        le=12,
        description="Past months shown as active while the current month is still open"
    )
    active_months_back_after_cutoff: int = Field(
        default=1,
        ge=0,
        le=12,
        description="Past months shown as active once the current month is locked"
    )
    active_months_ahead: int = Field(
        default=2,
        ge=0,
        le=12,
        description="Future months shown as active"
    )
    archived_months_max: int = Field(
        default=6,
        ge=0,
        le=60,
        description="Maximum archived months listed on the dashboard"
    )
    viewing_past_months: int = Field(
        default=12,
        ge=0,
        le=60,
        description="Past months included in the full viewing list"
    )
    viewing_future_months: int = Field(
        default=6,
        ge=0,
        le=24,
        description="Future months included in the full viewing list"
    )

    # ===================
    # AGGREGATION
    # ===================
    max_stats_months: int = Field(
        default=24,
        ge=1,
        le=120,
        description="Maximum production months per multi-month stats call"
    )
    attribute_marketplace_production: bool = Field(
        default=False,
        description="Distribute produced quantity to marketplace summaries"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()
