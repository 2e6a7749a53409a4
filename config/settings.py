"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, model_validator
from functools import lru_cache
from typing import Optional


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
    # FORECAST SIMULATION
    # ===================
    forecast_horizon_weeks: int = Field(
        default=12,
        ge=1,
        le=52,
        description="Weeks of forecast generated per SKU"
    )
    elapsed_forecast_weeks: int = Field(
        default=4,
        ge=0,
        le=52,
        description="Leading horizon weeks treated as already realized"
    )

    # ===================
    # DATA STORE
    # ===================
    refresh_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        le=30,
        description="Simulated latency of a dashboard refresh"
    )
    random_seed: Optional[int] = Field(
        None,
        description="Seed for the synthetic data generators (None = random)"
    )
    alert_on_status_change: bool = Field(
        default=True,
        description="Raise an alert when a stock update moves an item into an unhealthy status"
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

    @model_validator(mode="after")
    def check_forecast_window(self) -> "Settings":
        """Realized weeks must fit inside the horizon."""
        if self.elapsed_forecast_weeks > self.forecast_horizon_weeks:
            raise ValueError("elapsed_forecast_weeks cannot exceed forecast_horizon_weeks")
        return self

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
