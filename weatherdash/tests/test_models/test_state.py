"""Tests for dashboard state variants."""

import dataclasses

import pytest

from weatherdash.models.forecast import ForecastSnapshot
from weatherdash.models.location import Location
from weatherdash.models.state import DashboardStatus, Error, Loading, Ready


class TestStateVariants:
    def test_status_tags(self, nyc: Location, snapshot: ForecastSnapshot):
        assert Loading().status == DashboardStatus.LOADING
        assert Error("boom").status == DashboardStatus.ERROR
        assert Ready(nyc, snapshot).status == DashboardStatus.READY

    def test_states_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Error("boom").message = "other"  # type: ignore[misc]

    def test_equality(self):
        assert Loading() == Loading()
        assert Error("a") == Error("a")
        assert Error("a") != Error("b")

    def test_location_frozen(self, nyc: Location):
        with pytest.raises(dataclasses.FrozenInstanceError):
            nyc.latitude = 0.0  # type: ignore[misc]
