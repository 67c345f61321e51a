"""Configuration via pydantic-settings.

Values come from FISCALCODE_* environment variables or a .env file.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings.

    Usage:
        from fiscalcode.config import settings
        settings.log_level
        settings.century_cutoff
    """

    model_config = SettingsConfigDict(env_prefix="FISCALCODE_", env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False, description="Render log lines as JSON")
    century_cutoff: int | None = Field(
        default=None,
        ge=0,
        le=99,
        description="Two-digit birth years above this are read as 19xx (default: current year)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


# Module-level singleton
settings = Settings()
