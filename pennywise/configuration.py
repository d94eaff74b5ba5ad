"""Mini README: Centralised configuration for Pennywise.

Structure:
    * PennywiseSettings - pydantic-settings model read from ``PENNYWISE_*``
      environment variables or a local ``.env`` file.
    * get_settings - cached accessor so validation runs once per process.

The storage location and backend live here so the web factory, the CLI and
tests all agree on where the ledger is persisted.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import resolve_level


class PennywiseSettings(BaseSettings):
    """Runtime configuration for the finance tracker."""

    model_config = SettingsConfigDict(
        env_prefix="PENNYWISE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling reload and logging verbosity.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted key-value store.",
    )
    storage_backend: Literal["json", "memory"] = Field(
        "json",
        description="Storage backend identifier registered in the storage registry.",
    )
    storage_file: str = Field(
        "pennywise.json",
        description="File name of the JSON key-value store inside the data directory.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web interface exposes.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts in rendered pages.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name applied by the entry points.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        resolve_level(value)
        return value.strip().upper()

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories and make sure the directory exists."""

        path = Path(value or "data").expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        """Full path of the JSON key-value store."""

        return self.data_directory / self.storage_file


@lru_cache()
def get_settings() -> PennywiseSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PennywiseSettings()
