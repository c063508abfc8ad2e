"""Dashboard controller: location, forecast refresh, and state transitions."""

import logging
from collections.abc import Callable

from weatherdash.config.defaults import DEFAULT_LOCATION, location_from_config
from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.forecast_client import (
    ForecastFetchError,
    OpenMeteoClient,
    WeatherClient,
)
from weatherdash.ingest.geocoding_client import GeocodingClient, GeoResolver
from weatherdash.models.location import Location
from weatherdash.models.state import DashboardState, Error, Loading, Ready

logger = logging.getLogger(__name__)

StateListener = Callable[[DashboardState], None]


class DashboardController:
    """Holds the current location and the single DashboardState.

    Every fetch is tagged with a generation number. When fetches overlap,
    only the completion of the most recently started one is applied; older
    completions are dropped.
    """

    def __init__(
        self,
        resolver: GeoResolver,
        weather: WeatherClient,
        default_location: Location = DEFAULT_LOCATION,
    ):
        self.resolver = resolver
        self.weather = weather
        self._location = default_location
        self._state: DashboardState = Loading()
        self._generation = 0
        self._listeners: list[StateListener] = []

    @property
    def location(self) -> Location:
        return self._location

    @property
    def state(self) -> DashboardState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new state. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def mount(self) -> DashboardState:
        """Initial load for the preset location."""
        return await self._refresh()

    async def refresh(self) -> DashboardState:
        return await self._refresh()

    async def search(self, query: str) -> bool:
        """Geocode a place name and switch to it.

        Returns False, leaving state and location untouched, when nothing
        was found.
        """
        location = await self.resolver.resolve(query)
        if location is None:
            return False
        await self.change_location(location)
        return True

    async def change_location(self, location: Location) -> DashboardState:
        self._location = location
        return await self._refresh()

    async def _refresh(self) -> DashboardState:
        self._generation += 1
        generation = self._generation
        location = self._location
        self._transition(Loading())

        try:
            snapshot = await self.weather.fetch(location)
        except ForecastFetchError as e:
            if self._is_stale(generation, location):
                return self._state
            self._transition(Error(str(e)))
            return self._state

        if self._is_stale(generation, location):
            return self._state
        self._transition(Ready(location, snapshot))
        return self._state

    def _is_stale(self, generation: int, location: Location) -> bool:
        if generation == self._generation:
            return False
        logger.info(
            "Discarding stale forecast for %s (generation %d, current %d)",
            location.display_name, generation, self._generation,
        )
        return True

    def _transition(self, state: DashboardState) -> None:
        logger.debug("Dashboard state -> %s", state.status)
        self._state = state
        for listener in list(self._listeners):
            listener(state)


def build_controller(config: DashboardConfig) -> DashboardController:
    """Wire Open-Meteo clients and the default location from config."""
    api = config.api
    resolver = GeoResolver(
        GeocodingClient(
            base_url=api.geocoding_base_url,
            user_agent=api.user_agent,
            timeout=api.timeout_seconds,
        ),
        language=api.language,
    )
    weather = WeatherClient(
        OpenMeteoClient(
            base_url=api.forecast_base_url,
            user_agent=api.user_agent,
            timeout=api.timeout_seconds,
        )
    )
    return DashboardController(
        resolver, weather, location_from_config(config.default_location)
    )
