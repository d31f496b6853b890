"""Shared pytest fixtures for all test suites."""

from typing import Any

import pytest

from backend.app.db.store import InMemoryKeyValueStore
from backend.app.db.wishlist import WishlistRepository
from backend.app.models.adjustment import RouteAdjustment
from backend.app.models.common import Coordinates
from backend.app.models.route import GenerateRouteOutput
from backend.app.models.summary import RouteSummary
from tests.fakes import FakeActions


@pytest.fixture
def start_location() -> Coordinates:
    return Coordinates(lat=40.0, lng=-75.0)


@pytest.fixture
def route_payload() -> dict[str, Any]:
    """Model answer for a generate call, as raw JSON."""
    return {
        "routeDescription": "A 2km loop past the river",
        "locations": [
            {
                "name": "Riverside Park",
                "latitude": 40.001,
                "longitude": -75.001,
                "description": "Park with river views",
            }
        ],
        "totalEstimatedTime": 90,
    }


@pytest.fixture
def route_output(route_payload: dict[str, Any]) -> GenerateRouteOutput:
    return GenerateRouteOutput.model_validate(route_payload)


@pytest.fixture
def adjustment_payload() -> dict[str, Any]:
    return {
        "alternativeRoutes": ["Take the riverside path", "Cut through the old town"],
        "estimatedArrivalTimes": ["14:30", "14:10"],
        "reasonsForSuggestion": ["Avoids the bridge closure", "Shorter walk"],
    }


@pytest.fixture
def adjustment(adjustment_payload: dict[str, Any]) -> RouteAdjustment:
    return RouteAdjustment.model_validate(adjustment_payload)


@pytest.fixture
def summary() -> RouteSummary:
    return RouteSummary(summary="A relaxed 90 minute riverside loop with a coffee stop.")


@pytest.fixture
def fake_actions() -> FakeActions:
    return FakeActions()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def wishlist(store: InMemoryKeyValueStore) -> WishlistRepository:
    return WishlistRepository(store)
