"""Dashboard state variants.

A ``DashboardState`` is exactly one of ``Loading``, ``Error`` or ``Ready``.
Instances are frozen; the controller replaces the current state on every
transition instead of mutating it.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from weatherdash.models.forecast import ForecastSnapshot
from weatherdash.models.location import Location


class DashboardStatus(StrEnum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class Loading:
    status: DashboardStatus = field(default=DashboardStatus.LOADING, init=False)


@dataclass(frozen=True)
class Error:
    message: str
    status: DashboardStatus = field(default=DashboardStatus.ERROR, init=False)


@dataclass(frozen=True)
class Ready:
    location: Location
    snapshot: ForecastSnapshot
    status: DashboardStatus = field(default=DashboardStatus.READY, init=False)


DashboardState: TypeAlias = Loading | Error | Ready
