"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finance-forecast"
    log_level: str = "INFO"

    # Projections
    projection_window_days: int = 7  # trailing window for the discretionary trend
    history_months: int = 3  # previous months averaged for the year-end estimate

    # Recurring series
    max_recurrence_instances: int = 24

    # Display
    amount_format: str = "{:,.2f}"


settings = Settings()
