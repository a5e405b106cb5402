"""Application settings loaded from environment variables (or a ``.env`` file)."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Smart Logistics"
    APP_ENV: str = "development"
    LOG_LEVEL: str | None = None

    # Adapters
    STORAGE_BACKEND: str = "memory"
    SIGNAL_SOURCE: str = "fake"
    SIGNAL_API_URL: str = "http://localhost:8080"
    SIGNAL_TIMEOUT_SECONDS: float = 10.0

    # Tracking progression (original demo timings)
    PICKUP_AFTER_MINUTES: int = 6
    TRANSIT_AFTER_MINUTES: int = 12
    DELIVERY_WINDOW_HOURS: int = 24

    # Impact analysis
    TRAFFIC_DELAY_THRESHOLD_MINUTES: int = 30

    # Reject status transitions outside the lifecycle table
    STRICT_TRANSITIONS: bool = False


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached)."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
