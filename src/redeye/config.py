"""Configuration via pydantic-settings, read from REDEYE_* env vars / .env file."""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Redeye configuration. Command-line flags take precedence."""

    model_config = SettingsConfigDict(env_prefix="REDEYE_", env_file=".env", extra="ignore")

    format: Optional[Literal["common", "combined"]] = Field(
        default=None, description="Log format used when no format flag is given"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", description="Level of diagnostics written to stderr"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value
