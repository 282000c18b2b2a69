import logging
from datetime import time
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Identifier Configuration
    match_id_prefix: str = Field(
        "local-", description="Literal prefix of every minted match identifier."
    )

    # Season Configuration
    current_season: str = Field("2026", description="Season served by the catalog.")
    placeholder_kickoff: time = Field(
        time(12, 0),
        description="UTC time-of-day substituted when a kickoff is not yet confirmed.",
    )
    season_files: List[Path] = Field(
        default_factory=list,
        description="Extra JSON season definitions loaded next to the bundled data.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="FIXTURES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("match_id_prefix")
    @classmethod
    def _prefix_is_url_safe(cls, value: str) -> str:
        if not value or not all(c.isalnum() or c in "-_" for c in value):
            raise ValueError("match_id_prefix must be non-empty and URL-safe")
        return value


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
