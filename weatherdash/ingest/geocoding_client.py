"""Open-Meteo geocoding client and place-name resolver."""

import logging

import httpx

from weatherdash.config.schema import (
    DEFAULT_USER_AGENT,
    OPEN_METEO_GEOCODING_URL,
)
from weatherdash.models.location import Location

logger = logging.getLogger(__name__)


class GeocodingClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_GEOCODING_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    async def search(
        self, name: str, count: int = 1, language: str = "en"
    ) -> list[dict]:
        """Search places by name. Returns an empty list when nothing matches."""
        url = f"{self.base_url}/v1/search"
        params = {
            "name": name,
            "count": count,
            "language": language,
            "format": "json",
        }
        headers = {"User-Agent": self.user_agent}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected geocoding response: {data!r:.100}")
        # The service omits "results" entirely when there is no match
        results = data.get("results") or []
        if not isinstance(results, list):
            raise ValueError(f"Unexpected geocoding results: {results!r:.100}")
        return results


class GeoResolver:
    """Resolves a free-text place name to the single best-match Location.

    Every failure mode resolves to ``None`` so callers keep their last
    known good location.
    """

    def __init__(self, client: GeocodingClient, language: str = "en"):
        self.client = client
        self.language = language

    async def resolve(self, query: str) -> Location | None:
        query = query.strip()
        if not query:
            return None

        try:
            results = await self.client.search(
                query, count=1, language=self.language
            )
        except (httpx.HTTPError, ValueError):
            logger.exception("Location search failed for %r", query)
            return None

        if not results:
            logger.info("No location found for %r", query)
            return None

        top = results[0]
        try:
            location = Location(
                latitude=float(top["latitude"]),
                longitude=float(top["longitude"]),
                display_name=str(top["name"]),
            )
        except (KeyError, TypeError, ValueError):
            logger.exception("Unusable geocoding result for %r: %s", query, top)
            return None

        logger.info(
            "Resolved %r to %s (%.4f, %.4f)",
            query, location.display_name, location.latitude, location.longitude,
        )
        return location
