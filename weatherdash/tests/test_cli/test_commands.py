"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from weatherdash.cli import main
from weatherdash.config.loader import load_config

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"


def _fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "open-meteo" in captured.out

    def test_config_set(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main([
            "--config", str(config_path),
            "config", "set", "display.hourly_hours=24",
        ])
        assert result == 0
        captured = capsys.readouterr()
        assert "24" in captured.out
        assert load_config(config_path).display.hourly_hours == 24

    def test_config_set_keeps_other_values(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("api:\n  timeout_seconds: 7.5\n")
        result = main([
            "--config", str(config_path),
            "config", "set", "default_location.name=Lisbon",
        ])
        assert result == 0
        reloaded = load_config(config_path)
        assert reloaded.default_location.name == "Lisbon"
        assert reloaded.api.timeout_seconds == 7.5
        assert (tmp_path / "test.yaml.bak").read_text() == "api:\n  timeout_seconds: 7.5\n"

    def test_config_set_invalid_value_not_saved(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main([
            "--config", str(config_path),
            "config", "set", "display.hourly_hours=500",
        ])
        assert result == 1
        assert config_path.read_text() == ""

    def test_config_set_bad_format(self, tmp_path: Path, capsys):
        result = main([
            "--config", str(tmp_path / "missing.yaml"),
            "config", "set", "display.hourly_hours",
        ])
        assert result == 1

    @respx.mock
    def test_show_default_location(self, tmp_path: Path, capsys):
        respx.get(host="api.open-meteo.com", path="/v1/forecast").mock(
            return_value=httpx.Response(200, json=_fixture("openmeteo_forecast_nyc.json"))
        )
        result = main(["--config", str(tmp_path / "none.yaml"), "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "New York City Weather" in captured.out

    @respx.mock
    def test_show_city_json(self, tmp_path: Path, capsys):
        respx.get(host="geocoding-api.open-meteo.com", path="/v1/search").mock(
            return_value=httpx.Response(200, json=_fixture("geocoding_paris.json"))
        )
        forecast = respx.get(host="api.open-meteo.com", path="/v1/forecast").mock(
            return_value=httpx.Response(200, json=_fixture("openmeteo_forecast_nyc.json"))
        )
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "show", "--city", "Paris", "--json", "--hours", "2",
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["location"]["name"] == "Paris"
        assert len(data["hourly"]) == 2
        assert forecast.call_count == 1
        params = forecast.calls[0].request.url.params
        assert params["latitude"] == "48.85341"

    @respx.mock
    def test_show_unknown_city_falls_back_to_default(self, tmp_path: Path, capsys):
        respx.get(host="geocoding-api.open-meteo.com", path="/v1/search").mock(
            return_value=httpx.Response(200, json=_fixture("geocoding_empty.json"))
        )
        forecast = respx.get(host="api.open-meteo.com", path="/v1/forecast").mock(
            return_value=httpx.Response(200, json=_fixture("openmeteo_forecast_nyc.json"))
        )
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "show", "--city", "Qwxyzzz", "--json",
        ])
        assert result == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)["location"]["name"] == "New York City"
        assert "No location found" in captured.err
        assert forecast.call_count == 1

    @respx.mock
    def test_show_error_returns_1(self, tmp_path: Path, capsys):
        respx.get(host="api.open-meteo.com", path="/v1/forecast").mock(
            return_value=httpx.Response(500)
        )
        result = main(["--config", str(tmp_path / "none.yaml"), "show"])
        assert result == 1
        captured = capsys.readouterr()
        assert "Error: Weather data fetch failed (HTTP 500)" in captured.out
