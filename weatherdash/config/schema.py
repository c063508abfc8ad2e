"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com"
DEFAULT_USER_AGENT = "weatherdash/0.1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_base_url: str = OPEN_METEO_FORECAST_URL
    geocoding_base_url: str = OPEN_METEO_GEOCODING_URL
    language: str = "en"
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "New York City"
    latitude: float = Field(default=40.7128, ge=-90.0, le=90.0)
    longitude: float = Field(default=-74.0060, ge=-180.0, le=180.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_hours: int = Field(default=12, ge=1, le=48)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    default_location: LocationConfig = LocationConfig()
    display: DisplayConfig = DisplayConfig()
