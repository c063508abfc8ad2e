"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.forecast_client import parse_forecast
from weatherdash.models.forecast import ForecastSnapshot
from weatherdash.models.location import Location

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def default_config() -> DashboardConfig:
    return DashboardConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout_seconds": 10.0},
        "display": {"hourly_hours": 6},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "openmeteo_forecast_nyc.json") as f:
        return json.load(f)


@pytest.fixture
def snapshot(forecast_payload: dict) -> ForecastSnapshot:
    return parse_forecast(forecast_payload)


@pytest.fixture
def nyc() -> Location:
    return Location(latitude=40.7128, longitude=-74.006, display_name="New York City")


@pytest.fixture
def paris() -> Location:
    return Location(latitude=48.85341, longitude=2.3488, display_name="Paris")
