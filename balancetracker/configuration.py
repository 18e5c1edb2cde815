"""Mini README: Centralised configuration for the balance tracker.

Structure:
    * BalanceTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``BALANCE_TRACKER_*`` environment variables or a
    ``.env`` file. Call ``get_settings.cache_clear()`` after changing the
    environment (tests do this) to force a reload.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORAGE_KEY = "balance_tracker_v1"


class BalanceTrackerSettings(BaseSettings):
    """Runtime configuration for the balance tracker."""

    model_config = SettingsConfigDict(
        env_prefix="BALANCE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted ledger snapshot.",
        validate_default=True,
    )
    storage_key: str = Field(
        DEFAULT_STORAGE_KEY,
        description="Namespace key the snapshot is stored under.",
        min_length=1,
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the HTTP API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP API exposes.",
        ge=1,
        le=65535,
    )
    weekly_allowance: float = Field(
        250.0,
        description="Spend per week the outlook considers on track.",
        gt=0,
    )
    caution_margin: float = Field(
        50.0,
        description="Distance from the on-track threshold reported as caution.",
        ge=0,
    )
    history_display_limit: int = Field(
        100,
        description="Default number of entries listed by history views.",
        ge=1,
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories and make sure the directory exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache()
def get_settings() -> BalanceTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BalanceTrackerSettings()
