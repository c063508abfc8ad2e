"""Default dashboard location, used at startup before any search."""

from weatherdash.config.schema import DashboardConfig, LocationConfig
from weatherdash.models.location import Location


def location_from_config(cfg: LocationConfig) -> Location:
    return Location(
        latitude=cfg.latitude,
        longitude=cfg.longitude,
        display_name=cfg.name,
    )


DEFAULT_LOCATION: Location = location_from_config(
    DashboardConfig().default_location
)
