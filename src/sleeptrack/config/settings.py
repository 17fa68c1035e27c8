"""Configuration management for sleeptrack using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """Targets used when scoring weekly and monthly reports."""

    model_config = SettingsConfigDict(env_prefix="REPORT_", env_file=".env", extra="ignore")

    sleep_target_minutes: float = 8 * 60
    monthly_workout_target: int = 12  # 3x per week
    tracking_days_per_month: int = 30


class DataSettings(BaseSettings):
    """Export bundle settings."""

    model_config = SettingsConfigDict(env_prefix="SLEEPTRACK_", env_file=".env", extra="ignore")

    export_file: Path = Path("~/.local/share/sleeptrack/export.json")
    export_version: str = "1.0.0"


class Settings(BaseSettings):
    """Main sleeptrack settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # General
    environment: Literal["development", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    timezone: str = "America/Los_Angeles"

    # Sub-settings
    report: ReportSettings = Field(default_factory=ReportSettings)
    data: DataSettings = Field(default_factory=DataSettings)


# Global settings instance
settings = Settings()
