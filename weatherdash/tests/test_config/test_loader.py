"""Tests for config loading and get/set."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from weatherdash.config.defaults import DEFAULT_LOCATION
from weatherdash.config.loader import get_config_value, load_config, set_config_value
from weatherdash.config.schema import DashboardConfig


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.api.timeout_seconds == 10.0
        assert config.display.hourly_hours == 6
        assert config.default_location.name == "New York City"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DashboardConfig()

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "nope.yaml") == DashboardConfig()

    def test_none_uses_defaults(self):
        assert load_config(None) == DashboardConfig()

    def test_invalid_yaml_value(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("display:\n  hourly_hours: 0\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.api.timeout_seconds == 15.0
        assert config.display.hourly_hours == 12


class TestDefaultLocation:
    def test_matches_schema_defaults(self):
        assert DEFAULT_LOCATION.display_name == "New York City"
        assert DEFAULT_LOCATION.latitude == 40.7128
        assert DEFAULT_LOCATION.longitude == -74.0060


class TestGetSet:
    def test_get_value(self, default_config: DashboardConfig):
        assert get_config_value(default_config, "display.hourly_hours") == 12

    def test_get_missing_key(self, default_config: DashboardConfig):
        with pytest.raises(KeyError):
            get_config_value(default_config, "display.nope")

    def test_set_value_coerces_and_revalidates(self, default_config: DashboardConfig):
        new = set_config_value(default_config, "display.hourly_hours", "24")
        assert new.display.hourly_hours == 24
        assert default_config.display.hourly_hours == 12

    def test_set_float(self, default_config: DashboardConfig):
        new = set_config_value(default_config, "api.timeout_seconds", "2.5")
        assert new.api.timeout_seconds == 2.5

    def test_set_invalid_value(self, default_config: DashboardConfig):
        with pytest.raises(ValidationError):
            set_config_value(default_config, "display.hourly_hours", "100")

    def test_set_unknown_key(self, default_config: DashboardConfig):
        with pytest.raises(KeyError):
            set_config_value(default_config, "display.bogus", "1")
