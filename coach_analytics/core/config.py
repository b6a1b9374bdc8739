"""
Engine configuration.
All values can be overridden through environment variables or a .env file.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Analytics settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console

    # Calendar windows
    # Python weekday numbering: 0 = Monday ... 6 = Sunday
    WEEK_START_DAY: int = Field(default=6, ge=0, le=6)
    ROLLING_WINDOW_DAYS: int = Field(default=30, ge=1)

    # Record normalization
    DEFAULT_SESSION_TYPE: str = "training"

    # Ranking and charting
    TOP_SKILLS_LIMIT: int = Field(default=3, ge=0)
    TREND_SERIES_LENGTH: int = Field(default=6, ge=1)


settings = Settings()
