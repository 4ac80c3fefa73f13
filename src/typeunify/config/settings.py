"""Engine settings."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Stepper and CLI settings, read from `TYPEUNIFY_*` variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TYPEUNIFY_",
        case_sensitive=False,
        extra="ignore",
    )

    max_steps: int = Field(default=1000, ge=1)
    mathjax: bool = Field(default=False)
    log_profile: Literal["default", "rich"] = Field(default="default")


def load_settings(**overrides: Any) -> Settings:
    """Load settings, with keyword overrides taking precedence over the environment."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
