"""12-factor configuration adapter using environment variables and TOML config."""

import math
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# TOML section -> fields it may override
_TOML_SECTIONS = {
    "api": ("api_base_url", "api_timeout_seconds"),
    "search": ("search_radius_meters", "min_query_length"),
    "display": ("stationboard_limit", "refresh_interval_seconds", "timezone"),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Transport API configuration
    api_base_url: str = Field(
        default="https://transport.opendata.ch/v1",
        description="Base URL of the Swiss public transport API",
    )
    api_timeout_seconds: int = Field(
        default=10, gt=0, description="Timeout for transport API requests in seconds"
    )

    # Station search configuration
    search_radius_meters: float = Field(
        default=1000.0,
        description="Stations farther than this from the user location are not offered",
    )
    min_query_length: int = Field(
        default=2, ge=1, description="Minimum number of characters for a station search"
    )

    # Display configuration
    stationboard_limit: int = Field(
        default=6, ge=1, description="Number of departures to fetch per stationboard"
    )
    refresh_interval_seconds: int = Field(
        default=60, ge=1, description="Interval between departure refreshes in seconds"
    )
    timezone: str = Field(
        default="Europe/Zurich",
        description="Timezone for displaying departure times (IANA timezone name)",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_requests: bool = Field(
        default=False,
        validation_alias=AliasChoices("log_requests", "nmt_log_requests"),
        description="Log every outgoing transport API request (NMT_LOG_REQUESTS)",
    )

    # Optional TOML file overriding the values above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [api], [search] and [display] sections",
    )

    @field_validator("search_radius_meters")
    @classmethod
    def validate_search_radius(cls, v: float) -> float:
        """Validate the search radius is a positive, finite distance."""
        if not math.isfinite(v) or v <= 0:
            raise ValueError("search_radius_meters must be a positive finite number")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate the timezone is a known IANA timezone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got '{v}'") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is one the logging module knows."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load a TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_config_file(self) -> "AppConfig":
        """Override settings with the values of the TOML file, if one is configured.

        Returns:
            The same config instance, for chaining.
        """
        if not self.config_file:
            return self

        toml_data = self._load_toml_data()
        for section, keys in _TOML_SECTIONS.items():
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for key in keys:
                if key in values:
                    setattr(self, key, values[key])
        return self
