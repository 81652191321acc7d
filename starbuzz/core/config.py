"""Application configuration."""
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from STARBUZZ_* environment variables."""

    # Logging (stderr only; the order transcript is fixed)
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="STARBUZZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


settings = Settings()
