"""
Configuration settings for the Financial Health Analyzer.
All settings are loaded from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


DEFAULT_DISCLAIMER = (
    "These ranges are general guidelines. A precise interpretation must take "
    "into account the company's industry and its historical trends. The full "
    "analysis and any investment decision are solely the responsibility of "
    "each user; the results of this tool must not be considered, on their "
    "own, an investment recommendation."
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Presentation
    app_name: str = "Financial Health Analyzer"
    report_title: str = "Financial Health Report"
    default_currency: str = "USD"
    disclaimer: str = DEFAULT_DISCLAIMER
    print_margin_mm: int = 20

    # API settings
    api_title: str = "Financial Health Analyzer API"
    api_version: str = "1.0.0"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
