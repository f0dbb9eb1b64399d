"""12-factor configuration adapter using environment variables."""

import logging
from datetime import timedelta
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_PATH = Path(__file__).resolve().parents[2] / "data" / "dublinbike.json"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, ...)")

    # Dataset
    dataset_path: str = Field(
        default=str(DEFAULT_DATASET_PATH),
        description="Path to the JSON file holding the initial station records",
    )
    timezone: str = Field(
        default="Europe/Dublin",
        description="Timezone for local last-update times (IANA timezone name)",
    )

    # Cache
    cache_ttl_seconds: int = Field(
        default=300, gt=0, description="Seconds a cached read stays valid"
    )

    # Live-update simulator
    simulator_enabled: bool = Field(
        default=True, description="Run the background availability simulator"
    )
    simulator_interval_seconds: float = Field(
        default=15.0, gt=0, description="Seconds between simulator passes"
    )
    simulator_warmup_seconds: float = Field(
        default=5.0, ge=0, description="Seconds to wait before the first simulator pass"
    )
    simulator_seed: int | None = Field(
        default=None, description="Seed for repeatable simulator passes"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got '{v}'") from e
        return v

    @property
    def cache_ttl(self) -> timedelta:
        """Cache TTL as a timedelta."""
        return timedelta(seconds=self.cache_ttl_seconds)

    @property
    def zone(self) -> ZoneInfo:
        """Configured timezone."""
        return ZoneInfo(self.timezone)
