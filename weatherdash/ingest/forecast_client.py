"""Open-Meteo forecast client: fetches and parses forecast snapshots."""

import logging

import httpx

from weatherdash.config.schema import DEFAULT_USER_AGENT, OPEN_METEO_FORECAST_URL
from weatherdash.models.common import parse_local_timestamp
from weatherdash.models.forecast import (
    CurrentConditions,
    DailyPoint,
    ForecastSnapshot,
    HourlyPoint,
)
from weatherdash.models.location import Location

logger = logging.getLogger(__name__)

HOURLY_VARIABLES = (
    "temperature_2m",
    "relativehumidity_2m",
    "windspeed_10m",
    "precipitation_probability",
    "weathercode",
)
DAILY_VARIABLES = (
    "sunrise",
    "sunset",
    "uv_index_max",
    "temperature_2m_max",
    "temperature_2m_min",
    "weathercode",
)


class ForecastFetchError(Exception):
    """Raised when a forecast cannot be fetched or parsed.

    The message is human-readable and shown on the error screen as-is.
    """


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_FORECAST_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    async def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch current, hourly and daily forecast data for a coordinate.

        Single attempt; raises httpx errors on transport failure or non-2xx.
        """
        url = f"{self.base_url}/v1/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "hourly": ",".join(HOURLY_VARIABLES),
            "daily": ",".join(DAILY_VARIABLES),
            "timezone": "auto",
        }
        headers = {"User-Agent": self.user_agent}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
        resp.raise_for_status()
        return resp.json()


class WeatherClient:
    def __init__(self, client: OpenMeteoClient):
        self.client = client

    async def fetch(self, location: Location) -> ForecastSnapshot:
        """Fetch a forecast snapshot for a location.

        Raises ForecastFetchError on any failure; no retry.
        """
        try:
            raw = await self.client.get_forecast(
                location.latitude, location.longitude
            )
        except httpx.HTTPStatusError as e:
            logger.error(
                "Forecast request for %s returned %d",
                location.display_name, e.response.status_code,
            )
            raise ForecastFetchError(
                f"Weather data fetch failed (HTTP {e.response.status_code})"
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "Forecast request for %s failed: %s", location.display_name, e
            )
            detail = str(e) or type(e).__name__
            raise ForecastFetchError(f"Weather data fetch failed: {detail}") from e
        except ValueError as e:
            raise ForecastFetchError(f"Malformed forecast payload: {e}") from e

        try:
            snapshot = parse_forecast(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(
                "Malformed forecast payload for %s: %s", location.display_name, e
            )
            raise ForecastFetchError(f"Malformed forecast payload: {e}") from e

        logger.info(
            "Fetched forecast for %s: %d hourly, %d daily points",
            location.display_name, len(snapshot.hourly), len(snapshot.daily),
        )
        return snapshot


def parse_forecast(raw: dict) -> ForecastSnapshot:
    """Build a ForecastSnapshot from an Open-Meteo forecast payload.

    Raises KeyError on missing fields and ValueError when the arrays of the
    hourly or daily group differ in length. A null value inside an hourly or
    daily array is kept as None; the current conditions must be complete.
    """
    cw = raw["current_weather"]
    current = CurrentConditions(
        temperature=float(cw["temperature"]),
        wind_speed=float(cw["windspeed"]),
        condition_code=int(cw["weathercode"]),
    )

    hourly = raw["hourly"]
    times = _aligned_columns(hourly, ("time", *HOURLY_VARIABLES), "hourly")
    hourly_points = tuple(
        HourlyPoint(
            timestamp=parse_local_timestamp(t),
            temperature=_opt_float(temp),
            humidity=_opt_float(rh),
            wind_speed=_opt_float(ws),
            precipitation_chance=_opt_float(pp),
            condition_code=_opt_int(wc),
        )
        for t, temp, rh, ws, pp, wc in zip(*times)
    )

    daily = raw["daily"]
    days = _aligned_columns(daily, DAILY_VARIABLES, "daily")
    daily_points = tuple(
        DailyPoint(
            sunrise=parse_local_timestamp(sr),
            sunset=parse_local_timestamp(ss),
            uv_index_max=_opt_float(uv),
            temp_max=_opt_float(tmax),
            temp_min=_opt_float(tmin),
            condition_code=_opt_int(wc),
        )
        for sr, ss, uv, tmax, tmin, wc in zip(*days)
    )

    return ForecastSnapshot(
        current=current,
        hourly=hourly_points,
        daily=daily_points,
        timezone=raw.get("timezone", ""),
    )


def _aligned_columns(group: dict, keys: tuple[str, ...], name: str) -> list[list]:
    """Pull named columns from a group, requiring equal lengths."""
    columns = [group[k] for k in keys]
    lengths = {len(c) for c in columns}
    if len(lengths) > 1:
        raise ValueError(
            f"{name} arrays differ in length: "
            + ", ".join(f"{k}={len(c)}" for k, c in zip(keys, columns))
        )
    return columns


def _opt_float(value) -> float | None:
    return None if value is None else float(value)


def _opt_int(value) -> int | None:
    return None if value is None else int(value)
