"""Harness configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oas_conformance.schemas.version import VersionRequirement


class Settings(BaseSettings):
    """Harness settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OAS_CONFORMANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Corpus
    root: str = "openapi-directory/APIs"

    # Thread pool size; None means one worker per CPU
    workers: int | None = Field(None, ge=1)

    # Versions accepted for full validation
    version_requirement: str = ">=3.0.0, <3.1.0"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("version_requirement")
    @classmethod
    def _check_requirement(cls, value: str) -> str:
        VersionRequirement.parse(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
