"""Mini README: Centralised configuration models and helpers for Spendboard.

Structure:
    * SpendboardSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables, choose which
    transaction source feeds the dashboard, and specify service ports. The
    configuration is cached so the cost of validation is incurred only once
    per process; tests call ``get_settings.cache_clear()`` after patching the
    environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SpendboardSettings(BaseSettings):
    """Runtime configuration for the Spendboard service."""

    model_config = SettingsConfigDict(
        env_prefix="SPENDBOARD_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI entry points.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the dashboard API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the dashboard API exposes.",
        ge=1,
        le=65535,
    )
    transaction_source: str = Field(
        "sample",
        description="Identifier of the registered transaction source to load from.",
    )
    transactions_file: Optional[Path] = Field(
        None,
        description="JSON file read by the ``json_file`` transaction source.",
    )
    sample_delay_seconds: float = Field(
        1.0,
        description="Simulated network delay applied by the ``sample`` source.",
        ge=0.0,
    )

    @field_validator("transactions_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories so ``~/transactions.json`` works from env files."""

        if value is None or value == "":
            return None
        return Path(value).expanduser()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Accept standard level names in any casing, rejecting unknown ones early."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised

    @field_validator("transaction_source")
    @classmethod
    def _normalise_source(cls, value: str) -> str:
        return value.strip().lower()


@lru_cache()
def get_settings() -> SpendboardSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SpendboardSettings()
