"""Application configuration via pydantic-settings.

Invariants:
    - Every value can be overridden with a ``ROSTER_``-prefixed env var
    - get_settings() is cached (lru_cache), one instance per process
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime switches for diagnostics and logging."""

    model_config = SettingsConfigDict(
        env_prefix="ROSTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    developer_mode: bool = Field(
        default=False,
        description="Emit validation-failure diagnostics.",
    )
    diagnostic_max_length: int = Field(
        default=100,
        ge=1,
        description="Characters of context kept in a diagnostic before truncation.",
    )
    log_level: str = Field(default="WARNING", description="Root level for the roster logger.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
