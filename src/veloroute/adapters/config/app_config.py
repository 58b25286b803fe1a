"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# TOML section -> fields that may be set from it
_TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "route": ("route_budget_minutes", "max_budget_minutes", "revalidate_on_remove"),
    "mapbox": (
        "mapbox_api_timeout",
        "mapbox_min_delay_seconds",
        "cycling_profile",
        "isochrone_contours",
    ),
    "stations": (
        "publibike_stations_url",
        "partner_stations_url",
        "station_refresh_interval_seconds",
        "merge_precision",
    ),
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

    # Mapbox configuration
    mapbox_api_key: str = Field(default="", description="Mapbox access token")
    mapbox_api_timeout: int = Field(
        default=10, description="Timeout for Mapbox API requests in seconds"
    )
    mapbox_min_delay_seconds: float = Field(
        default=0.0,
        description="Minimum delay between Mapbox API requests in seconds",
    )
    cycling_profile: str = Field(
        default="mapbox/cycling", description="Mapbox routing profile for isochrones and directions"
    )
    isochrone_contours: list[int] = Field(
        default_factory=lambda: [10, 20, 30],
        description="Isochrone contours in minutes shown around a clicked station",
    )

    # Route configuration
    route_budget_minutes: int = Field(
        default=30, description="Maximum cycling minutes between consecutive stops"
    )
    max_budget_minutes: int = Field(
        default=60, description="Upper bound of the minimal budget search in minutes"
    )
    revalidate_on_remove: bool = Field(
        default=False,
        description="Re-check reachability of the neighbours joined by a removal",
    )

    # Station feeds
    publibike_stations_url: str = Field(
        default="https://rest.publibike.ch/v1/public/stations",
        description="Provider A station feed",
    )
    partner_stations_url: str = Field(
        default="",
        description="Provider B station feed (empty disables the feed)",
    )
    station_refresh_interval_seconds: int = Field(
        default=300, description="Interval between station reloads in seconds"
    )
    merge_precision: int = Field(
        default=3, description="Decimals of the coordinates used to match stations"
    )

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Optional TOML configuration file with [route], [mapbox] and [stations] sections",
    )

    @field_validator("max_budget_minutes")
    @classmethod
    def validate_max_budget(cls, v: int) -> int:
        """Validate the search cap is within what the isochrone service accepts."""
        if not 1 <= v <= 60:
            raise ValueError("max_budget_minutes must be between 1 and 60")
        return v

    @field_validator("merge_precision")
    @classmethod
    def validate_merge_precision(cls, v: int) -> int:
        """Validate the merge precision is a sensible number of decimals."""
        if not 0 <= v <= 7:
            raise ValueError("merge_precision must be between 0 and 7")
        return v

    @field_validator("isochrone_contours")
    @classmethod
    def validate_isochrone_contours(cls, v: list[int]) -> list[int]:
        """Validate there are 1 to 4 contours, each between 1 and 60 minutes."""
        if not 1 <= len(v) <= 4:
            raise ValueError("isochrone_contours must have between 1 and 4 entries")
        if any(not 1 <= c <= 60 for c in v):
            raise ValueError("isochrone_contours must be between 1 and 60 minutes")
        return sorted(v)

    @model_validator(mode="after")
    def validate_route_budget(self) -> "AppConfig":
        """Validate the route budget fits inside the search range."""
        if not 1 <= self.route_budget_minutes <= self.max_budget_minutes:
            raise ValueError("route_budget_minutes must be between 1 and max_budget_minutes")
        return self

    def load_toml(self) -> dict[str, Any]:
        """Load the TOML file and apply the settings found in it.

        Returns:
            The parsed TOML data, or an empty dict if no file is configured.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, fields in _TOML_SECTIONS.items():
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for field_name in fields:
                if field_name in values:
                    setattr(self, field_name, values[field_name])

        return toml_data
