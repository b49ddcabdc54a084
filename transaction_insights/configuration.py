"""Mini README: Centralised configuration for Transaction Insights.

Structure:
    * TransactionInsightsSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and the web interface.

Usage:
    Set ``TRANSACTION_INSIGHTS_DATA_FILE`` (or a ``.env`` entry) to point at the
    JSON export to analyse. Values are validated once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class TransactionInsightsSettings(BaseSettings):
    """Runtime configuration for loading and serving transaction analytics."""

    environment: str = Field(
        "development",
        description="Environment label shown in logs.",
    )
    data_file: Path = Field(
        Path("transactions.json"),
        description="JSON array of transaction records loaded at start-up.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the command line tool.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface the JSON API binds to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON API listens on.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "TRANSACTION_INSIGHTS_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_file", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand ``~`` so operators can use home-relative paths."""

        return Path(value).expanduser()

    @validator("log_level")
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing of the standard logging level names."""

        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> TransactionInsightsSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TransactionInsightsSettings()
