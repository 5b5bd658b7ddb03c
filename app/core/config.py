"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Injury Risk Assessment Engine"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = []
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Sample retention and assessment window
    RETENTION_DAYS: int = 30
    ASSESSMENT_WINDOW: int = 7
    NEXT_ASSESSMENT_HOURS: int = 24
    MAX_RECOMMENDATIONS: int = 5

    # Fail at startup when a pattern references an unknown risk factor
    CATALOG_STRICT: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
