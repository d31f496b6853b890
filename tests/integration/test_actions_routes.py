"""Integration tests for the POST /actions/* endpoints.

The gateway dependency is overridden with one backed by a scripted
completion client, so no network calls are made.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from backend.app.main import app
from backend.app.models.common import PlanningOperation
from backend.app.planning.gateway import PlanningGateway, get_planning_gateway
from tests.fakes import FakeCompletionClient

GENERATE_BODY = {
    "prompt": "scenic walk, coffee stop",
    "radius": 2000,
    "timeLimit": 120,
    "currentLocation": {"lat": 40.0, "lng": -75.0},
}


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def client(completion_client: FakeCompletionClient) -> Iterator[TestClient]:
    app.dependency_overrides[get_planning_gateway] = lambda: PlanningGateway(completion_client)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_generate_route_returns_output(
    client: TestClient, completion_client: FakeCompletionClient, route_payload: dict[str, Any]
) -> None:
    """Test the example request end to end: camelCase in, camelCase out."""
    completion_client.responses[PlanningOperation.generate_route] = route_payload

    response = client.post("/actions/generate-route", json=GENERATE_BODY)

    assert response.status_code == 200
    assert response.json() == route_payload
    prompt = completion_client.calls[0]["prompt"]
    assert "radius of 2000 meters" in prompt
    assert "time limit of 120 minutes" in prompt


def test_generate_route_failure_is_error_body(
    client: TestClient, completion_client: FakeCompletionClient, route_payload: dict[str, Any]
) -> None:
    """Test that an invalid model answer is a 200 with an error field, not a 5xx."""
    del route_payload["locations"]
    completion_client.responses[PlanningOperation.generate_route] = route_payload

    response = client.post("/actions/generate-route", json=GENERATE_BODY)

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"error"}
    assert "invalid data" in body["error"]


def test_generate_route_rejects_invalid_request(client: TestClient) -> None:
    response = client.post("/actions/generate-route", json={**GENERATE_BODY, "radius": -1})

    assert response.status_code == 422


def test_summarize_route(client: TestClient, completion_client: FakeCompletionClient) -> None:
    completion_client.responses[PlanningOperation.summarize_route] = {"summary": "Nice loop"}

    response = client.post(
        "/actions/summarize-route",
        json={
            "routeDescription": "A 2km loop past the river",
            "estimatedTime": "90 minutes",
            "attractionPreferences": "parks, cafes",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"summary": "Nice loop"}
    assert "Estimated Distance: not available" in completion_client.calls[0]["prompt"]


def test_adjust_route(
    client: TestClient,
    completion_client: FakeCompletionClient,
    adjustment_payload: dict[str, Any],
) -> None:
    completion_client.responses[PlanningOperation.adjust_route] = adjustment_payload

    response = client.post(
        "/actions/adjust-route",
        json={
            "currentRoute": "A 2km loop past the river",
            "trafficConditions": "Bridge closed",
            "timeConstraints": "Back by 5pm",
            "radius": 5000,
        },
    )

    assert response.status_code == 200
    assert response.json() == adjustment_payload


def test_adjust_route_transport_failure(
    client: TestClient, completion_client: FakeCompletionClient
) -> None:
    completion_client.responses[PlanningOperation.adjust_route] = ConnectionError("network down")

    response = client.post(
        "/actions/adjust-route",
        json={
            "currentRoute": "Loop",
            "trafficConditions": "Bridge closed",
            "timeConstraints": "Back by 5pm",
            "radius": 2000,
        },
    )

    assert response.status_code == 200
    assert "network down" in response.json()["error"]
